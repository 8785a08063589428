"""Core interfaces and context objects shared by pdfstudio tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ...backends import DocumentCodec, get_default_codec
from ...core.model import Document, open_document
from ...core.utils import resolve_path
from ...core.validator import ensure_output_parent, ensure_pdf_exists


@dataclass
class ConversionContext:
    """Holds the inputs, outputs and configuration of one tool invocation.

    ``output_path`` may name a file or an existing directory. When it is a
    directory, or missing, tools write into it using the conventional output
    file name for the operation.
    """

    input_path: Path | None = None
    output_path: Path | None = None
    codec: DocumentCodec = field(default_factory=get_default_codec)
    document: Document | None = None
    resources: dict[str, Any] = field(default_factory=dict)
    config: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.input_path, (str, Path)):
            self.input_path = resolve_path(self.input_path)
        if isinstance(self.output_path, (str, Path)):
            self.output_path = resolve_path(self.output_path)

    def ensure_document(self) -> Document:
        if self.document is None:
            if self.input_path is None:
                raise ValueError("ConversionContext requires an input_path to load a document")
            self.document = open_document(ensure_pdf_exists(self.input_path), codec=self.codec)
        return self.document

    def destination(self, filename: str) -> Path:
        """Return where a result called *filename* should be written."""

        output = self.output_path
        if output is None:
            base = self.input_path.parent if self.input_path is not None else Path.cwd()
            output = base / filename
        elif output.is_dir() or not output.suffix:
            output = output / filename
        return ensure_output_parent(output)


class BaseTool:
    """Base class for all pluggable pdfstudio tools."""

    name: str

    def __init__(self, context: ConversionContext) -> None:
        self.context = context

    def run(self) -> Any:  # pragma: no cover - to be implemented by subclasses
        raise NotImplementedError

    def write_output(self, data: bytes, filename: str) -> Path:
        destination = self.context.destination(filename)
        with destination.open("wb") as output_stream:
            output_stream.write(data)
        self.context.resources["result"] = destination
        return destination
