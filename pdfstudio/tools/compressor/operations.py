"""Structural compression for :mod:`pdfstudio.tools.compressor`."""

from __future__ import annotations

from ...backends import DocumentCodec, SaveOptions
from ...core.exceptions import DivisionGuardError
from ...core.model import DEFAULT_DOCUMENT_NAME, Document, load_document
from ...core.utils import format_file_size, get_logger
from .profiles import CompressionLevel, CompressionOutcome, CompressionReport, get_profile

LOGGER = get_logger("pdfstudio.compress")

STRUCTURAL_COMPACTION = SaveOptions(compress_streams=True, deduplicate_objects=True)


def compress_document(
    document: Document,
    level: CompressionLevel | str = CompressionLevel.MEDIUM,
) -> CompressionOutcome:
    """Re-serialize *document* with structural compaction.

    The profile selected by *level* is resolved and reported, but embedded
    images are left untouched: every level produces the same bytes for the
    same input. ``document.source_size`` is used as the original size.

    Raises:
        ValueError: If *level* is not a known compression level.
        DivisionGuardError: If the original size is zero.
        SerializationError: If the codec fails to write the document.
    """

    profile = get_profile(level)
    if document.source_size <= 0:
        raise DivisionGuardError(document.name)

    LOGGER.debug(
        "Compressing %s at level %s (quality=%.2f, image scale=%.2f; images are not re-encoded)",
        document.name,
        profile.level.value,
        profile.quality_factor,
        profile.image_scale,
    )
    data = document.serialize(STRUCTURAL_COMPACTION)
    report = CompressionReport.from_sizes(document.source_size, len(data))
    LOGGER.debug(
        "Compressed %s from %s to %s (%.2f%%)",
        document.name,
        format_file_size(report.original_size),
        format_file_size(report.compressed_size),
        report.percent_reduction,
    )
    return CompressionOutcome(data=data, report=report, profile=profile)


def compress_bytes(
    data: bytes,
    level: CompressionLevel | str = CompressionLevel.MEDIUM,
    *,
    name: str = DEFAULT_DOCUMENT_NAME,
    codec: DocumentCodec | None = None,
) -> CompressionOutcome:
    """Load *data* and compress it, guarding against zero-byte input first."""

    get_profile(level)
    if not data:
        raise DivisionGuardError(name)
    document = load_document(data, name=name, codec=codec)
    return compress_document(document, level)


__all__ = ["STRUCTURAL_COMPACTION", "compress_document", "compress_bytes"]
