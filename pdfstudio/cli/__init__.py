"""Command line entry points for pdfstudio."""
