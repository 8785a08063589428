"""Page range parsing for the :mod:`pdfstudio.tools.splitter` package."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator

_LEADING_INTEGER_RE = re.compile(r"\s*([+-]?\d+)", re.ASCII)


@dataclass(frozen=True)
class PageSelection:
    """Canonical set of zero-based page indices.

    ``indices`` is always strictly increasing and free of duplicates, so
    iterating a selection visits pages in document order.
    """

    indices: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        canonical = tuple(sorted(set(self.indices)))
        if canonical and canonical[0] < 0:
            raise ValueError("Page indices must not be negative")
        object.__setattr__(self, "indices", canonical)

    @classmethod
    def from_indices(cls, indices: Iterable[int]) -> "PageSelection":
        return cls(tuple(indices))

    @classmethod
    def all(cls, page_count: int) -> "PageSelection":
        """Return a selection covering every page of a *page_count* document."""

        return cls(tuple(range(max(page_count, 0))))

    @property
    def page_numbers(self) -> tuple[int, ...]:
        """The selection as 1-based page numbers."""

        return tuple(index + 1 for index in self.indices)

    def describe(self) -> str:
        """Return a compact 1-based description such as ``1-3,5``."""

        groups: list[str] = []
        numbers = self.page_numbers
        start = previous = None
        for number in numbers:
            if start is None:
                start = previous = number
            elif number == previous + 1:
                previous = number
            else:
                groups.append(_format_group(start, previous))
                start = previous = number
        if start is not None:
            groups.append(_format_group(start, previous))
        return ",".join(groups)

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices)

    def __len__(self) -> int:
        return len(self.indices)

    def __contains__(self, index: object) -> bool:
        return index in self.indices

    def __bool__(self) -> bool:
        return bool(self.indices)


def _format_group(start: int, end: int) -> str:
    return str(start) if start == end else f"{start}-{end}"


def _parse_int(text: str) -> int | None:
    match = _LEADING_INTEGER_RE.match(text)
    if match is None:
        return None
    return int(match.group(1))


def parse_page_selection(expression: str | None, page_count: int) -> PageSelection:
    """Parse a range *expression* such as ``"1-3,5,7-9"`` into a selection.

    Page numbers in the expression are 1-based and ranges are inclusive.
    Parsing is permissive: each bound is read from its leading integer
    (``"2.5"`` is page 2, ``"3abc"`` is page 3), tokens without one are
    ignored, a range whose start exceeds its end selects nothing, and
    numbers outside ``1..page_count`` are dropped rather than clamped.

    Args:
        expression: Comma separated page numbers and ranges.
        page_count: Number of pages in the document the selection is for.

    Returns:
        A :class:`PageSelection` in ascending page order, regardless of the
        order in which tokens were written.
    """

    if not expression or page_count <= 0:
        return PageSelection()

    selected: set[int] = set()
    for token in (part.strip() for part in expression.split(",")):
        if not token:
            continue
        if "-" in token:
            start_text, end_text = token.split("-", 1)
            start = _parse_int(start_text)
            end = _parse_int(end_text)
            if start is None or end is None:
                continue
        else:
            start = end = _parse_int(token)
            if start is None:
                continue

        first = max(start, 1)
        last = min(end, page_count)
        selected.update(number - 1 for number in range(first, last + 1))

    return PageSelection(tuple(selected))


__all__ = ["PageSelection", "parse_page_selection"]
