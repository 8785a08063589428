"""pypdf backend implementation for pdfstudio."""

from __future__ import annotations

import io
from typing import Sequence

from pypdf import PageObject, PdfReader, PdfWriter
from pypdf.errors import PdfReadError
from pypdf.generic import NameObject, RectangleObject

from ..core.exceptions import CorruptDocumentError, SerializationError
from ..core.utils import get_logger
from .base import DocumentCodec, PageSize, SaveOptions

LOGGER = get_logger("pdfstudio.backends.pypdf")

# Boxes that follow the media box when they coincide with it.
_SECONDARY_BOXES = ("/CropBox", "/BleedBox", "/TrimBox", "/ArtBox")


def _box_bounds(box: Sequence[object]) -> tuple[float, ...]:
    return tuple(float(value) for value in box)  # type: ignore[arg-type]


class PypdfCodec(DocumentCodec):
    """Codec implementation that uses `pypdf` under the hood.

    Documents are held as :class:`pypdf.PdfWriter` instances so the same
    handle can be measured, resized in place and serialized.
    """

    def load(self, data: bytes) -> PdfWriter:
        try:
            reader = PdfReader(io.BytesIO(data))
        except PdfReadError as exc:
            raise CorruptDocumentError(f"Corrupted or invalid PDF data: {exc}") from exc
        except Exception as exc:
            raise CorruptDocumentError(f"Unexpected error reading PDF data: {exc}") from exc

        if reader.is_encrypted:
            LOGGER.debug("Attempting to decrypt encrypted PDF with an empty password")
            try:
                decrypted = reader.decrypt("")
            except Exception as exc:
                raise CorruptDocumentError("Encrypted PDF cannot be decrypted") from exc
            if not decrypted:
                raise CorruptDocumentError("Encrypted PDF requires a password")

        try:
            return PdfWriter(clone_from=reader)
        except Exception as exc:
            raise CorruptDocumentError(f"Unable to read PDF structure: {exc}") from exc

    def create_empty(self) -> PdfWriter:
        return PdfWriter()

    def page_count(self, document: PdfWriter) -> int:
        return len(document.pages)

    def page_size(self, document: PdfWriter, index: int) -> PageSize:
        box = document.pages[index].mediabox
        return PageSize(float(box.width), float(box.height))

    def set_page_size(self, document: PdfWriter, index: int, width: float, height: float) -> None:
        page = document.pages[index]
        media = page.mediabox
        left, bottom = float(media.left), float(media.bottom)
        previous = _box_bounds(media)
        resized = [left, bottom, left + width, bottom + height]

        for key in _SECONDARY_BOXES:
            if key in page and _box_bounds(page[key]) == previous:
                page[NameObject(key)] = RectangleObject(resized)
        page.mediabox = RectangleObject(resized)

    def copy_pages(self, source: PdfWriter, indices: Sequence[int]) -> list[PageObject]:
        return [source.pages[index] for index in indices]

    def append_page(self, destination: PdfWriter, page: PageObject) -> None:
        # add_page clones the page and its resources into the destination.
        destination.add_page(page)

    def _detached_copy(self, document: PdfWriter) -> PdfWriter:
        buffer = io.BytesIO()
        document.write(buffer)
        buffer.seek(0)
        return PdfWriter(clone_from=PdfReader(buffer))

    def serialize(self, document: PdfWriter, options: SaveOptions | None = None) -> bytes:
        """Write *document* to bytes.

        Compaction runs on a detached copy so the caller's handle is never
        rewritten.
        """
        options = options or SaveOptions()
        buffer = io.BytesIO()
        try:
            if options.compress_streams or options.deduplicate_objects:
                document = self._detached_copy(document)
            if options.compress_streams:
                for page in document.pages:
                    page.compress_content_streams()
            if options.deduplicate_objects:
                document.compress_identical_objects()
            document.write(buffer)
        except Exception as exc:
            LOGGER.error("Failed to serialize PDF: %s", exc)
            raise SerializationError(f"Failed to serialize PDF: {exc}") from exc
        return buffer.getvalue()


__all__ = ["PypdfCodec"]
