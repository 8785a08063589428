"""Plugin exposing compression through the registry."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ...core.utils import build_output_filename, get_logger
from ...core.validator import ensure_pdf_exists
from ..common.interfaces import BaseTool
from ..common.options import CompressOptions
from ..common.pipeline import register_tool
from .operations import compress_bytes
from .profiles import CompressionLevel, CompressionReport


LOGGER = get_logger("pdfstudio.tools.compress")


@dataclass(frozen=True)
class CompressionResult:
    """Where the compressed file was written and how much it shrank."""

    input_path: Path
    output_path: Path
    level: CompressionLevel
    report: CompressionReport


@register_tool("compress")
class CompressTool(BaseTool):
    def run(self) -> CompressionResult:
        context = self.context
        if context.input_path is None:
            raise ValueError("Compression requires an input path")
        options = CompressOptions.from_config(context.config)
        source = ensure_pdf_exists(context.input_path)

        LOGGER.debug("Compressing %s with level %s", source, options.level.value)
        outcome = compress_bytes(source.read_bytes(), options.level, name=source.name, codec=context.codec)
        destination = self.write_output(outcome.data, build_output_filename("compress", source.name))
        LOGGER.info(
            "Compressed %s: %d -> %d bytes (%.2f%%)",
            source.name,
            outcome.report.original_size,
            outcome.report.compressed_size,
            outcome.report.percent_reduction,
        )
        result = CompressionResult(
            input_path=source,
            output_path=destination,
            level=options.level,
            report=outcome.report,
        )
        context.resources["result"] = result
        return result
