"""Document merging exposed through the pdfstudio tools namespace."""

from __future__ import annotations

from .operations import concatenate, merge_documents

__all__ = ["concatenate", "merge_documents"]
