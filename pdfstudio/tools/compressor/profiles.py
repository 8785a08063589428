"""Compression levels and the report produced by a compression run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ...core.exceptions import DivisionGuardError


class CompressionLevel(str, Enum):
    """Qualitative compression levels offered to users."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, value: "CompressionLevel | str") -> "CompressionLevel":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unknown compression level: {value}") from exc


@dataclass(frozen=True)
class CompressionProfile:
    """Encoder parameters associated with a :class:`CompressionLevel`.

    ``quality_factor`` and ``image_scale`` describe the JPEG quality and the
    downsampling ratio an image re-encoding step would use. The current
    serializer does not re-encode images, so they are informational only.
    """

    level: CompressionLevel
    quality_factor: float
    image_scale: float


COMPRESSION_PROFILES: dict[CompressionLevel, CompressionProfile] = {
    CompressionLevel.LOW: CompressionProfile(CompressionLevel.LOW, quality_factor=0.8, image_scale=0.9),
    CompressionLevel.MEDIUM: CompressionProfile(CompressionLevel.MEDIUM, quality_factor=0.6, image_scale=0.7),
    CompressionLevel.HIGH: CompressionProfile(CompressionLevel.HIGH, quality_factor=0.3, image_scale=0.4),
}


def get_profile(level: CompressionLevel | str) -> CompressionProfile:
    return COMPRESSION_PROFILES[CompressionLevel.parse(level)]


@dataclass(frozen=True)
class CompressionReport:
    """Size comparison between an original document and its compressed form."""

    original_size: int
    compressed_size: int
    percent_reduction: float

    @classmethod
    def from_sizes(cls, original_size: int, compressed_size: int) -> "CompressionReport":
        if original_size <= 0:
            raise DivisionGuardError()
        reduction = (original_size - compressed_size) / original_size * 100
        return cls(original_size, compressed_size, reduction)

    @property
    def bytes_saved(self) -> int:
        return self.original_size - self.compressed_size

    @property
    def compression_ratio(self) -> float:
        return self.compressed_size / self.original_size


@dataclass(frozen=True)
class CompressionOutcome:
    """Compressed bytes together with the matching :class:`CompressionReport`."""

    data: bytes
    report: CompressionReport
    profile: CompressionProfile


__all__ = [
    "CompressionLevel",
    "CompressionProfile",
    "CompressionReport",
    "CompressionOutcome",
    "COMPRESSION_PROFILES",
    "get_profile",
]
