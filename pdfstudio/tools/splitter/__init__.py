"""Page range parsing and extraction exposed through the pdfstudio tools namespace."""

from __future__ import annotations

from .operations import extract_selection, split_by_expression, split_document
from .utils import PageSelection, parse_page_selection

__all__ = [
    "PageSelection",
    "parse_page_selection",
    "extract_selection",
    "split_document",
    "split_by_expression",
]
