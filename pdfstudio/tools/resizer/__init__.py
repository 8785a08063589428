"""Page resizing exposed through the pdfstudio tools namespace."""

from __future__ import annotations

from .operations import RESIZE_PRESETS, resize_document, scale_pages

__all__ = ["RESIZE_PRESETS", "resize_document", "scale_pages"]
