"""Compression utilities exposed through the pdfstudio tools namespace."""

from __future__ import annotations

from .operations import STRUCTURAL_COMPACTION, compress_bytes, compress_document
from .profiles import (
    COMPRESSION_PROFILES,
    CompressionLevel,
    CompressionOutcome,
    CompressionProfile,
    CompressionReport,
    get_profile,
)

__all__ = [
    "COMPRESSION_PROFILES",
    "STRUCTURAL_COMPACTION",
    "CompressionLevel",
    "CompressionOutcome",
    "CompressionProfile",
    "CompressionReport",
    "compress_bytes",
    "compress_document",
    "get_profile",
]
