"""Context, options and registry shared by pdfstudio tools."""
