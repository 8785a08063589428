"""Page extraction for :mod:`pdfstudio.tools.splitter`."""

from __future__ import annotations

from ...backends import SaveOptions
from ...core.model import Document
from ...core.utils import get_logger
from .utils import PageSelection, parse_page_selection

LOGGER = get_logger("pdfstudio.split")


def extract_selection(document: Document, selection: PageSelection) -> Document:
    """Copy the pages in *selection* into a new in-memory document.

    Pages are appended in ascending index order. Every index must be valid for
    *document*; an empty selection yields a document without pages.
    """

    page_count = document.page_count()
    if selection and selection.indices[-1] >= page_count:
        raise IndexError(
            f"Page index {selection.indices[-1]} is out of range for {page_count} page(s)"
        )

    codec = document.codec
    output = Document.create_empty(codec, name=document.name)
    for page in codec.copy_pages(document.handle, selection.indices):
        codec.append_page(output.handle, page)
    return output


def split_document(
    document: Document,
    selection: PageSelection,
    *,
    options: SaveOptions | None = None,
) -> bytes:
    """Return a serialized PDF holding only the pages in *selection*."""

    LOGGER.debug(
        "Extracting %d of %d page(s) from %s: %s",
        len(selection),
        document.page_count(),
        document.name,
        selection.describe() or "<none>",
    )
    return extract_selection(document, selection).serialize(options)


def split_by_expression(document: Document, expression: str) -> bytes:
    """Parse *expression* against *document* and extract the matching pages."""

    selection = parse_page_selection(expression, document.page_count())
    return split_document(document, selection)


__all__ = ["extract_selection", "split_document", "split_by_expression"]
