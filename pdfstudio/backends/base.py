"""Codec protocol for PDF reading, page copying and writing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Sequence


@dataclass(frozen=True)
class PageSize:
    """Width and height of a page box in points."""

    width: float
    height: float

    def scaled(self, factor: float) -> "PageSize":
        return PageSize(self.width * factor, self.height * factor)


@dataclass(frozen=True)
class SaveOptions:
    """Serialization switches understood by a codec.

    Attributes:
        compress_streams: Flate-compress page content streams before writing.
        deduplicate_objects: Merge identical objects and drop orphaned ones.
    """

    compress_streams: bool = False
    deduplicate_objects: bool = False


class DocumentCodec(Protocol):
    """Protocol defining the document operations the transformers rely on.

    Handles returned by :meth:`load` and :meth:`create_empty` are opaque to
    callers; only the codec that produced them may inspect them.
    """

    def load(self, data: bytes) -> Any:
        """Parse *data* and return a mutable document handle."""

    def create_empty(self) -> Any:
        """Return a handle for a new document without pages."""

    def page_count(self, document: Any) -> int:
        """Return the number of pages in *document*."""

    def page_size(self, document: Any, index: int) -> PageSize:
        """Return the media box size of page *index*."""

    def set_page_size(self, document: Any, index: int, width: float, height: float) -> None:
        """Resize the page boxes of page *index* in place."""

    def copy_pages(self, source: Any, indices: Sequence[int]) -> list[Any]:
        """Return page handles for *indices* of *source*, in the given order."""

    def append_page(self, destination: Any, page: Any) -> None:
        """Append a structural copy of *page* to *destination*."""

    def serialize(self, document: Any, options: SaveOptions | None = None) -> bytes:
        """Write *document* to a byte buffer."""
