"""Namespace for pluggable pdfstudio tools."""

from __future__ import annotations

from .common.pipeline import registry


def load_builtin_plugins() -> None:
    from .resizer import resize  # noqa: F401
    from .splitter import split  # noqa: F401
    from .merger import merge  # noqa: F401
    from .compressor import compress  # noqa: F401


__all__ = ["registry", "load_builtin_plugins"]
