"""Document concatenation for :mod:`pdfstudio.tools.merger`."""

from __future__ import annotations

from typing import Sequence

from ...backends import DocumentCodec
from ...core.exceptions import NoOperationTargetError
from ...core.model import Document
from ...core.utils import MERGED_FILENAME, get_logger

LOGGER = get_logger("pdfstudio.merge")


def concatenate(documents: Sequence[Document], *, codec: DocumentCodec | None = None) -> Document:
    """Append every page of *documents*, in order, to a new document.

    Raises:
        NoOperationTargetError: If *documents* is empty.
    """

    if not documents:
        raise NoOperationTargetError("No documents provided to merge")

    codec = codec or documents[0].codec
    merged = Document.create_empty(codec, name=MERGED_FILENAME)
    for document in documents:
        page_count = document.page_count()
        LOGGER.debug("Appending %d page(s) from %s", page_count, document.name)
        for page in codec.copy_pages(document.handle, range(page_count)):
            codec.append_page(merged.handle, page)
    return merged


def merge_documents(documents: Sequence[Document], *, codec: DocumentCodec | None = None) -> bytes:
    """Concatenate *documents* and return the serialized result.

    A single document yields an identity copy of its pages.
    """

    merged = concatenate(documents, codec=codec)
    LOGGER.debug("Merged %d document(s) into %d page(s)", len(documents), merged.page_count())
    return merged.serialize()


__all__ = ["concatenate", "merge_documents"]
