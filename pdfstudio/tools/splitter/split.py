"""Plugin exposing page extraction through the registry."""

from __future__ import annotations

from pathlib import Path

from ...core.utils import build_output_filename, get_logger
from ..common.interfaces import BaseTool
from ..common.options import SplitOptions
from ..common.pipeline import register_tool
from .operations import split_document
from .utils import parse_page_selection

LOGGER = get_logger("pdfstudio.tools.split")


@register_tool("split")
class SplitTool(BaseTool):
    def run(self) -> Path | None:
        options = SplitOptions.from_config(self.context.config)
        if not options.ranges:
            LOGGER.warning("No page range given; nothing to split")
            return None

        document = self.context.ensure_document()
        selection = parse_page_selection(options.ranges, document.page_count())
        if not selection:
            LOGGER.warning("Range %r selects no pages of %s", options.ranges, document.name)
        self.context.resources["selection"] = selection

        data = split_document(document, selection)
        destination = self.write_output(data, build_output_filename("split", document.name))
        LOGGER.info("Extracted pages %s into %s", selection.describe() or "<none>", destination)
        return destination
