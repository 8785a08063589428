"""Plugin exposing page resizing through the registry."""

from __future__ import annotations

from pathlib import Path

from ...core.utils import build_output_filename, get_logger
from ..common.interfaces import BaseTool
from ..common.options import ResizeOptions
from ..common.pipeline import register_tool
from .operations import resize_document

LOGGER = get_logger("pdfstudio.tools.resize")


@register_tool("resize")
class ResizeTool(BaseTool):
    def run(self) -> Path:
        options = ResizeOptions.from_config(self.context.config)
        document = self.context.ensure_document()
        data = resize_document(document, options.scale)
        destination = self.write_output(data, build_output_filename("resize", document.name))
        LOGGER.info("Resized %d page(s) by %s into %s", document.page_count(), options.scale, destination)
        return destination
