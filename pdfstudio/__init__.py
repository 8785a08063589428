"""Resize, split, merge and compress PDF documents locally."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from .backends import DocumentCodec, PageSize, PypdfCodec, SaveOptions, get_default_codec
from .core.exceptions import (
    CorruptDocumentError,
    DivisionGuardError,
    InvalidScaleFactorError,
    NoOperationTargetError,
    PdfStudioError,
    SerializationError,
    ValidationError,
)
from .core.model import Document, load_document, open_document
from .core.utils import build_output_filename, format_file_size
from .tools import load_builtin_plugins
from .tools.common.interfaces import ConversionContext
from .tools.common.pipeline import ToolRegistry, register_tool, registry, run_tool
from .tools.compressor import (
    COMPRESSION_PROFILES,
    CompressionLevel,
    CompressionOutcome,
    CompressionProfile,
    CompressionReport,
    compress_bytes,
    compress_document,
    get_profile,
)
from .tools.compressor.compress import CompressionResult
from .tools.merger import merge_documents
from .tools.resizer import RESIZE_PRESETS, resize_document
from .tools.splitter import PageSelection, parse_page_selection, split_document

load_builtin_plugins()

__version__ = "1.0.0"

__all__ = [
    "Document",
    "DocumentCodec",
    "PypdfCodec",
    "PageSize",
    "SaveOptions",
    "get_default_codec",
    "load_document",
    "open_document",
    "PageSelection",
    "parse_page_selection",
    "resize_document",
    "split_document",
    "merge_documents",
    "compress_document",
    "compress_bytes",
    "RESIZE_PRESETS",
    "COMPRESSION_PROFILES",
    "CompressionLevel",
    "CompressionProfile",
    "CompressionReport",
    "CompressionOutcome",
    "CompressionResult",
    "get_profile",
    "build_output_filename",
    "format_file_size",
    "ConversionContext",
    "ToolRegistry",
    "registry",
    "register_tool",
    "run_tool",
    "PdfStudioError",
    "ValidationError",
    "CorruptDocumentError",
    "SerializationError",
    "NoOperationTargetError",
    "DivisionGuardError",
    "InvalidScaleFactorError",
    "resize_file",
    "split_file",
    "merge_files",
    "compress_file",
    "__version__",
]


def resize_file(input: str | Path, output: str | Path | None = None, *, scale: float = 1.0) -> Path:
    """Convenience wrapper around the resize plugin."""

    context = ConversionContext(input_path=input, output_path=output, config={"scale": scale})
    return run_tool("resize", context)


def split_file(
    input: str | Path,
    output: str | Path | None = None,
    *,
    ranges: str | Sequence[object],
) -> Path | None:
    """Convenience wrapper around the split plugin.

    Returns ``None`` without writing anything when *ranges* is empty.
    """

    context = ConversionContext(input_path=input, output_path=output, config={"ranges": ranges})
    return run_tool("split", context)


def merge_files(inputs: Iterable[str | Path], output: str | Path | None = None) -> Path | None:
    """Convenience wrapper around the merge plugin.

    Returns ``None`` without writing anything when fewer than two inputs are
    supplied.
    """

    context = ConversionContext(output_path=output, config={"inputs": list(inputs)})
    return run_tool("merge", context)


def compress_file(
    input: str | Path,
    output: str | Path | None = None,
    *,
    level: CompressionLevel | str = CompressionLevel.MEDIUM,
) -> CompressionResult:
    """Convenience wrapper around the compression plugin."""

    context = ConversionContext(input_path=input, output_path=output, config={"level": level})
    return run_tool("compress", context)
