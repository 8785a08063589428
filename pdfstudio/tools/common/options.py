"""Typed option structs built from a tool's ``config`` mapping."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping, Sequence

from ...core.utils import resolve_path
from ...core.validator import check_scale_factor
from ..compressor.profiles import CompressionLevel


@dataclass(frozen=True)
class ResizeOptions:
    scale: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "scale", check_scale_factor(self.scale))

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "ResizeOptions":
        return cls(scale=config.get("scale", 1.0))


def _range_tokens(ranges: Iterable[object]) -> Iterator[str]:
    for item in ranges:
        if isinstance(item, str):
            yield item
        elif isinstance(item, int):
            yield str(item)
        elif isinstance(item, Sequence) and len(item) == 2:
            yield f"{item[0]}-{item[1]}"
        # anything else is an unreadable token and is dropped


@dataclass(frozen=True)
class SplitOptions:
    """Page range expression for the split tool.

    ``ranges`` may be given in config as a string (``"1-3,5"``) or as a
    sequence of strings, page numbers and ``(start, end)`` pairs.
    """

    ranges: str = ""

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "SplitOptions":
        ranges = config.get("ranges")
        if ranges is None:
            return cls()
        if isinstance(ranges, str):
            return cls(ranges=ranges.strip())
        return cls(ranges=",".join(_range_tokens(ranges)))


@dataclass(frozen=True)
class MergeOptions:
    inputs: tuple[Path, ...] = ()

    @classmethod
    def from_config(cls, config: Mapping[str, Any], fallback: Path | None = None) -> "MergeOptions":
        inputs = config.get("inputs")
        if inputs is None:
            inputs = [fallback] if fallback is not None else []
        return cls(inputs=tuple(resolve_path(path) for path in inputs))


@dataclass(frozen=True)
class CompressOptions:
    level: CompressionLevel = CompressionLevel.MEDIUM

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", CompressionLevel.parse(self.level))

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "CompressOptions":
        level = config.get("level")
        if level is None:
            level = config.get("compression_level", CompressionLevel.MEDIUM)
        return cls(level=level)


__all__ = ["ResizeOptions", "SplitOptions", "MergeOptions", "CompressOptions"]
