"""Codec abstractions for pdfstudio."""

from .base import DocumentCodec, PageSize, SaveOptions
from .pypdf_backend import PypdfCodec

_DEFAULT_CODEC = PypdfCodec()


def get_default_codec() -> DocumentCodec:
    """Return the shared codec used when callers do not supply one."""

    return _DEFAULT_CODEC


__all__ = [
    "DocumentCodec",
    "PageSize",
    "PypdfCodec",
    "SaveOptions",
    "get_default_codec",
]
