"""Validation helpers shared by pdfstudio tools."""

from __future__ import annotations

import math
from pathlib import Path

from .exceptions import InvalidScaleFactorError, ValidationError
from .utils import resolve_path


def ensure_pdf_exists(path: str | Path) -> Path:
    resolved = resolve_path(path)
    if not resolved.exists():
        raise ValidationError(f"PDF file not found: {resolved}")
    if not resolved.is_file():
        raise ValidationError(f"PDF path is not a file: {resolved}")
    if resolved.suffix.lower() != ".pdf":
        raise ValidationError(f"Expected a PDF file, got: {resolved}")
    return resolved


def ensure_output_parent(path: str | Path) -> Path:
    resolved = resolve_path(path)
    resolved.parent.mkdir(parents=True, exist_ok=True)
    return resolved


def check_scale_factor(factor: object) -> float:
    """Return *factor* as a float, rejecting non-finite or non-positive values."""

    if isinstance(factor, bool):
        raise InvalidScaleFactorError(factor)
    try:
        value = float(factor)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidScaleFactorError(factor) from exc
    if not math.isfinite(value) or value <= 0:
        raise InvalidScaleFactorError(factor)
    return value


__all__ = ["ValidationError", "check_scale_factor", "ensure_pdf_exists", "ensure_output_parent"]
