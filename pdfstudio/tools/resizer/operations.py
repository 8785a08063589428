"""Page geometry scaling for :mod:`pdfstudio.tools.resizer`."""

from __future__ import annotations

from ...core.model import Document
from ...core.utils import get_logger
from ...core.validator import check_scale_factor

LOGGER = get_logger("pdfstudio.resize")

RESIZE_PRESETS: tuple[float, ...] = (0.5, 0.75, 1.0, 1.25, 1.5, 2.0)


def scale_pages(document: Document, factor: float) -> Document:
    """Multiply the width and height of every page box by *factor* in place.

    Only the page boxes change. Content streams keep their coordinates, so
    shrinking a page clips its drawing and enlarging it leaves empty margin
    above and to the right of the original content.
    """

    factor = check_scale_factor(factor)
    for index in range(document.page_count()):
        size = document.page_size(index)
        scaled = size.scaled(factor)
        document.set_page_size(index, scaled.width, scaled.height)
        LOGGER.debug(
            "Page %d: %.2fx%.2f -> %.2fx%.2f",
            index + 1,
            size.width,
            size.height,
            scaled.width,
            scaled.height,
        )
    return document


def resize_document(document: Document, factor: float) -> bytes:
    """Scale every page of *document* by *factor* and return the serialized PDF."""

    LOGGER.debug("Resizing %s by factor %s", document.name, factor)
    return scale_pages(document, factor).serialize()


__all__ = ["RESIZE_PRESETS", "scale_pages", "resize_document"]
