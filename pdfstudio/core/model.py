"""Document model shared by the pdfstudio transformers.

A :class:`Document` pairs an opaque codec handle with the codec that created
it. Transformers only talk to pages through the accessors defined here and on
:class:`~pdfstudio.backends.base.DocumentCodec`; page content is never
inspected directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..backends import DocumentCodec, PageSize, SaveOptions, get_default_codec
from .utils import get_logger, resolve_path

LOGGER = get_logger("pdfstudio.core.model")

DEFAULT_DOCUMENT_NAME = "document.pdf"


@dataclass
class Document:
    """A loaded PDF document.

    Attributes:
        handle: Codec specific document object.
        codec: Codec that owns ``handle``.
        name: File name used when deriving output names.
        source_size: Size in bytes of the buffer the document was loaded
            from, ``0`` for documents created in memory.
    """

    handle: Any
    codec: DocumentCodec = field(default_factory=get_default_codec, repr=False)
    name: str = DEFAULT_DOCUMENT_NAME
    source_size: int = 0

    def page_count(self) -> int:
        return self.codec.page_count(self.handle)

    def page_size(self, index: int) -> PageSize:
        return self.codec.page_size(self.handle, index)

    def page_sizes(self) -> list[PageSize]:
        return [self.page_size(index) for index in range(self.page_count())]

    def set_page_size(self, index: int, width: float, height: float) -> None:
        self.codec.set_page_size(self.handle, index, width, height)

    def serialize(self, options: SaveOptions | None = None) -> bytes:
        return self.codec.serialize(self.handle, options)

    @classmethod
    def create_empty(cls, codec: DocumentCodec | None = None, *, name: str = DEFAULT_DOCUMENT_NAME) -> "Document":
        codec = codec or get_default_codec()
        return cls(handle=codec.create_empty(), codec=codec, name=name)


def load_document(
    data: bytes,
    *,
    name: str = DEFAULT_DOCUMENT_NAME,
    codec: DocumentCodec | None = None,
) -> Document:
    """Parse *data* into a :class:`Document`.

    Raises:
        CorruptDocumentError: If the codec cannot parse ``data``.
    """

    codec = codec or get_default_codec()
    handle = codec.load(data)
    document = Document(handle=handle, codec=codec, name=name, source_size=len(data))
    LOGGER.debug("Loaded %s (%d bytes, %d pages)", name, len(data), document.page_count())
    return document


def open_document(path: str | Path, *, codec: DocumentCodec | None = None) -> Document:
    """Read the PDF at *path* and return it as a :class:`Document`."""

    pdf_path = resolve_path(path)
    return load_document(pdf_path.read_bytes(), name=pdf_path.name, codec=codec)


__all__ = ["Document", "DEFAULT_DOCUMENT_NAME", "load_document", "open_document"]
