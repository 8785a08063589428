"""Utilities shared by pdfstudio tools."""

from __future__ import annotations

import logging
from pathlib import Path

OUTPUT_PREFIXES = {
    "resize": "resized-",
    "split": "split-",
    "compress": "compressed-",
}
MERGED_FILENAME = "merged.pdf"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def set_log_level(level: int) -> None:
    """Set the threshold for every logger in the ``pdfstudio`` namespace."""

    logging.getLogger("pdfstudio").setLevel(level)


def resolve_path(path: str | Path | None) -> Path:
    if path is None:
        raise ValueError("Path must not be None")
    resolved = Path(path).expanduser().resolve()
    return resolved


def build_output_filename(operation: str, original: str | Path | None = None) -> str:
    """Return the download name used for the result of *operation*.

    Merging always produces ``merged.pdf``; every other operation prefixes the
    original file name, e.g. ``split-report.pdf``.
    """

    if operation == "merge":
        return MERGED_FILENAME
    try:
        prefix = OUTPUT_PREFIXES[operation]
    except KeyError as exc:
        raise ValueError(f"Unknown operation: {operation}") from exc
    if original is None:
        raise ValueError(f"Operation '{operation}' requires the original file name")
    return f"{prefix}{Path(original).name}"


def format_file_size(size_bytes: int) -> str:
    """Format *size_bytes* as ``B``, ``KB`` or ``MB`` with two decimals."""

    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.2f} KB"
    return f"{size_bytes / (1024 * 1024):.2f} MB"
