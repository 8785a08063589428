"""Shared building blocks for pdfstudio tools."""
