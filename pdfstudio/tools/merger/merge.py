"""Plugin exposing PDF merge capabilities through the registry."""

from __future__ import annotations

from pathlib import Path

from ...core.model import open_document
from ...core.utils import build_output_filename, get_logger
from ...core.validator import ensure_pdf_exists
from ..common.interfaces import BaseTool
from ..common.options import MergeOptions
from ..common.pipeline import register_tool
from .operations import merge_documents

LOGGER = get_logger("pdfstudio.tools.merge")


@register_tool("merge")
class MergeTool(BaseTool):
    def run(self) -> Path | None:
        context = self.context
        options = MergeOptions.from_config(context.config, fallback=context.input_path)
        if len(options.inputs) < 2:
            LOGGER.warning("Merging needs at least two PDFs, got %d", len(options.inputs))
            return None

        LOGGER.debug("Merging %d input(s)", len(options.inputs))
        documents = [open_document(ensure_pdf_exists(path), codec=context.codec) for path in options.inputs]
        data = merge_documents(documents, codec=context.codec)
        destination = self.write_output(data, build_output_filename("merge"))
        LOGGER.info("Merged %d PDFs into %s", len(documents), destination)
        return destination
