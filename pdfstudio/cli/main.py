"""
Command-line interface for pdfstudio.
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from pdfstudio import __version__
from pdfstudio.core.exceptions import PdfStudioError
from pdfstudio.core.model import open_document
from pdfstudio.core.utils import format_file_size, set_log_level
from pdfstudio.tools import load_builtin_plugins
from pdfstudio.tools.common.interfaces import ConversionContext
from pdfstudio.tools.common.pipeline import run_tool
from pdfstudio.tools.compressor import COMPRESSION_PROFILES, CompressionLevel
from pdfstudio.tools.resizer import RESIZE_PRESETS

console = Console()

LEVEL_CHOICES = [level.value for level in CompressionLevel]


def _fail(exc: Exception) -> None:
    console.print(f"\n[bold red]✗ Error:[/bold red] {exc}")
    sys.exit(1)


def _run(tool_name: str, context: ConversionContext):
    try:
        return run_tool(tool_name, context)
    except (PdfStudioError, OSError, ValueError) as exc:
        _fail(exc)


def _output_dir(path: str) -> Path:
    directory = Path(path).expanduser()
    directory.mkdir(parents=True, exist_ok=True)
    return directory


output_dir_option = click.option(
    '--output-dir', '-o',
    default='.',
    help='Directory that receives the output file',
    type=click.Path(file_okay=False),
)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """
    pdfstudio - resize, split, merge and compress PDF files.
    """
    load_builtin_plugins()
    set_log_level(logging.DEBUG if verbose else logging.WARNING)


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
def show_info(input_pdf):
    """
    Display page count and page sizes of a PDF file.

    Example:

        pdfstudio info input.pdf
    """
    try:
        document = open_document(input_pdf)
    except (PdfStudioError, OSError) as exc:
        _fail(exc)

    table = Table(title=f"PDF Information: {document.name}")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    table.add_row("File Size", format_file_size(document.source_size))
    table.add_row("Pages", str(document.page_count()))
    for number, size in enumerate(document.page_sizes(), start=1):
        table.add_row(f"Page {number}", f"{size.width:.2f} x {size.height:.2f} pt")

    console.print()
    console.print(table)
    console.print()


@cli.command(name="resize")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--scale', '-s',
    default=1.0,
    show_default=True,
    help='Scale factor for page width and height (presets: '
    + ', '.join(f'{preset:g}' for preset in RESIZE_PRESETS) + ')',
    type=click.FloatRange(min=0, min_open=True),
)
@output_dir_option
def resize(input_pdf, scale, output_dir):
    """
    Scale the page size of every page.

    Examples:

        pdfstudio resize input.pdf --scale 0.5

        pdfstudio resize input.pdf -s 1.25 -o resized/
    """
    context = ConversionContext(
        input_path=input_pdf,
        output_path=_output_dir(output_dir),
        config={"scale": scale},
    )
    destination = _run("resize", context)
    console.print(f"[bold green]✓ Resized by {scale:g}x:[/bold green] {destination}")


@cli.command(name="split")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--ranges', '-r',
    default='',
    help='Pages to keep, e.g. "1-3,5,7-9" (1-indexed, inclusive)',
    type=str,
)
@output_dir_option
def split(input_pdf, ranges, output_dir):
    """
    Extract the pages named by a range expression into a new PDF.

    Pages are always written in document order. Unreadable tokens and
    pages beyond the end of the document are ignored.

    Examples:

        pdfstudio split input.pdf --ranges "1-3,5"

        pdfstudio split input.pdf -r "10-20" -o extracts/
    """
    if not ranges.strip():
        console.print("[yellow]Nothing to split: provide --ranges.[/yellow]")
        return

    context = ConversionContext(
        input_path=input_pdf,
        output_path=_output_dir(output_dir),
        config={"ranges": ranges},
    )
    destination = _run("split", context)
    selection = context.resources.get("selection")
    if selection is not None and not selection:
        console.print("[yellow]The range selected no pages; wrote an empty PDF.[/yellow]")
    pages = selection.describe() if selection else "none"
    console.print(f"[bold green]✓ Extracted pages {pages}:[/bold green] {destination}")


@cli.command(name="merge")
@click.argument('input_pdfs', nargs=-1, type=click.Path(exists=True, dir_okay=False))
@output_dir_option
def merge(input_pdfs, output_dir):
    """
    Concatenate PDF files in the order given.

    Example:

        pdfstudio merge cover.pdf body.pdf appendix.pdf -o out/
    """
    if len(input_pdfs) < 2:
        console.print("[yellow]Nothing to merge: provide at least two PDF files.[/yellow]")
        return

    context = ConversionContext(
        output_path=_output_dir(output_dir),
        config={"inputs": list(input_pdfs)},
    )
    destination = _run("merge", context)
    console.print(f"[bold green]✓ Merged {len(input_pdfs)} files:[/bold green] {destination}")


@cli.command(name="compress")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--level', '-l',
    default=CompressionLevel.MEDIUM.value,
    show_default=True,
    help='Compression level',
    type=click.Choice(LEVEL_CHOICES),
)
@output_dir_option
def compress(input_pdf, level, output_dir):
    """
    Re-save a PDF with stream compression and duplicate object removal.

    Images are not re-encoded, so every level currently produces the same
    output.

    Example:

        pdfstudio compress input.pdf --level high
    """
    context = ConversionContext(
        input_path=input_pdf,
        output_path=_output_dir(output_dir),
        config={"level": level},
    )
    result = _run("compress", context)
    report = result.report
    profile = COMPRESSION_PROFILES[result.level]

    table = Table(title="Compression Results", show_header=False)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Level", f"{profile.level.value} (quality {profile.quality_factor:g}, image scale {profile.image_scale:g})")
    table.add_row("Original Size", format_file_size(report.original_size))
    table.add_row("Compressed Size", format_file_size(report.compressed_size))
    table.add_row("Reduction", f"{report.percent_reduction:.1f}%")

    console.print(table)
    console.print(f"[bold green]✓ Saved:[/bold green] {result.output_path}")


if __name__ == "__main__":  # pragma: no cover
    cli()
