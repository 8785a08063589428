"""Custom exceptions raised by :mod:`pdfstudio`."""

from __future__ import annotations


class PdfStudioError(Exception):
    """Base exception for all errors raised by :mod:`pdfstudio`."""


class ValidationError(PdfStudioError):
    """Raised when an input file fails the pre-flight checks of a tool."""


class CorruptDocumentError(PdfStudioError):
    """Raised when the codec cannot parse the supplied bytes as a PDF."""


class SerializationError(PdfStudioError):
    """Raised when the codec fails while producing output bytes."""


class NoOperationTargetError(PdfStudioError):
    """Raised when an operation is invoked without any document to act on."""


class DivisionGuardError(PdfStudioError):
    """Raised when a compression report would divide by a zero-byte original."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        target = f" {name!r}" if name else ""
        super().__init__(f"Cannot compute compression ratio for zero-byte document{target}")


class InvalidScaleFactorError(PdfStudioError, ValueError):
    """Raised when a resize factor is not a finite positive number."""

    def __init__(self, factor: object) -> None:
        self.factor = factor
        super().__init__(f"Scale factor must be a finite number greater than zero, got {factor!r}")


__all__ = [
    "PdfStudioError",
    "ValidationError",
    "CorruptDocumentError",
    "SerializationError",
    "NoOperationTargetError",
    "DivisionGuardError",
    "InvalidScaleFactorError",
]
