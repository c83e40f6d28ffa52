"""
Command-line interface for pdfcli.
"""

import os
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pdfcli import __version__, operations
from pdfcli.exceptions import (
    InvalidArgumentError,
    MissingToolError,
    PdfCliError,
    ToolFailedError,
)
from pdfcli.tools import tool_status
from pdfcli.types import CompressPreset, PageSelection
from pdfcli.utils import configure_logging, format_file_size

console = Console()


def _fail(error: PdfCliError) -> None:
    """Print *error* with its diagnostics and exit with status 1."""

    if isinstance(error, ToolFailedError):
        console.print(f"\n[bold red]✗ Error:[/bold red] {error.tool} exited with status {error.status}")
        console.print(f"[dim]Command: {escape(error.command)}[/dim]", highlight=False)
        if error.stdout:
            console.print("[bold]stdout:[/bold]")
            console.print(error.stdout, markup=False, highlight=False)
        if error.stderr:
            console.print("[bold]stderr:[/bold]")
            console.print(error.stderr, markup=False, highlight=False)
    elif isinstance(error, MissingToolError):
        console.print(f"\n[bold red]✗ Error:[/bold red] required tool '{error.tool}' was not found")
        console.print(error.hint, markup=False, highlight=False)
    else:
        console.print(f"\n[bold red]✗ Error:[/bold red] {escape(str(error))}", highlight=False)
    sys.exit(1)


def _parse_pages(ctx, param, value):
    try:
        return PageSelection.parse(value)
    except InvalidArgumentError as exc:
        raise click.BadParameter(str(exc)) from exc


@click.group()
@click.version_option(version=__version__)
@click.option(
    '--verbose', '-v',
    count=True,
    help='Increase log verbosity (-v for info, -vv for debug)'
)
@click.option(
    '--log-level',
    envvar='PDFCLI_LOG_LEVEL',
    default='WARNING',
    show_default=True,
    help='Log level when --verbose is not given'
)
def cli(verbose, log_level):
    """
    pdfcli - Inspect and manipulate PDF files.
    """
    if verbose >= 2:
        log_level = 'DEBUG'
    elif verbose == 1:
        log_level = 'INFO'
    configure_logging(log_level)


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path())
def show_info(input_pdf):
    """
    Display page count and metadata of a PDF file.

    Example:

        pdfcli info input.pdf
    """
    try:
        pdf_info = operations.info(input_pdf)
    except PdfCliError as e:
        _fail(e)

    table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("File Size", format_file_size(os.path.getsize(input_pdf)))
    table.add_row("Pages", str(pdf_info.pages))
    for key, value in pdf_info.metadata.items():
        table.add_row(key, value)

    console.print()
    console.print(table)
    console.print()


@cli.command(name="merge")
@click.argument('inputs', nargs=-1, required=True, type=click.Path())
@click.option(
    '--output', '-o',
    required=True,
    help='Output PDF path',
    type=click.Path()
)
def merge(inputs, output):
    """
    Merge PDF files in the given order.

    Example:

        pdfcli merge a.pdf b.pdf c.pdf -o merged.pdf
    """
    try:
        destination = operations.merge(list(inputs), output)
    except PdfCliError as e:
        _fail(e)

    console.print(f"\n[bold green]✓ Merged {len(inputs)} file(s) into:[/bold green] {destination}")
    console.print()


@cli.command(name="split")
@click.argument('input_pdf', type=click.Path())
@click.option(
    '--output-dir', '-o',
    default='./output',
    help='Output directory for split pages',
    type=click.Path()
)
@click.option(
    '--pattern', '-p',
    default=None,
    help="Output file pattern containing '%d' for the page number",
    type=str
)
def split(input_pdf, output_dir, pattern):
    """
    Split a PDF into one file per page.

    Examples:

        pdfcli split input.pdf

        pdfcli split input.pdf -o pages -p 'pages/chapter-%d.pdf'
    """
    try:
        directory = operations.split_pages(input_pdf, output_dir, pattern)
    except PdfCliError as e:
        _fail(e)

    console.print("\n[bold green]✓ Successfully split pages[/bold green]")
    console.print(f"[dim]Output directory: {os.path.abspath(directory)}[/dim]")
    console.print()


@cli.command(name="rotate")
@click.argument('input_pdf', type=click.Path())
@click.option(
    '--output', '-o',
    required=True,
    help='Output PDF path',
    type=click.Path()
)
@click.option(
    '--degrees', '-d',
    required=True,
    type=click.Choice(['90', '180', '270']),
    help='Clockwise rotation'
)
@click.option(
    '--pages', '-p',
    default='all',
    show_default=True,
    callback=_parse_pages,
    help="Pages to rotate: 'all' or '<start>-<end>'"
)
def rotate(input_pdf, output, degrees, pages):
    """
    Rotate all pages, or one page range, of a PDF.

    Examples:

        pdfcli rotate input.pdf -d 90 -o rotated.pdf

        pdfcli rotate input.pdf -d 180 -p 2-4 -o rotated.pdf
    """
    try:
        destination = operations.rotate(input_pdf, output, int(degrees), pages)
    except PdfCliError as e:
        _fail(e)

    console.print(f"\n[bold green]✓ Rotated pages {pages} by {degrees}°:[/bold green] {destination}")
    console.print()


@cli.command(name="compress")
@click.argument('input_pdf', type=click.Path())
@click.option(
    '--output', '-o',
    required=True,
    help='Output PDF path',
    type=click.Path()
)
@click.option(
    '--preset',
    default=CompressPreset.EBOOK.value,
    show_default=True,
    type=click.Choice([preset.value for preset in CompressPreset], case_sensitive=False),
    help='Ghostscript quality preset'
)
def compress(input_pdf, output, preset):
    """
    Compress a PDF with Ghostscript.

    Example:

        pdfcli compress input.pdf -o small.pdf --preset screen
    """
    try:
        destination = operations.compress(input_pdf, output, CompressPreset(preset.lower()))
    except PdfCliError as e:
        _fail(e)

    console.print(f"\n[bold green]✓ Compressed with preset {preset}:[/bold green] {destination}")
    if os.path.exists(input_pdf) and os.path.exists(destination):
        before = format_file_size(os.path.getsize(input_pdf))
        after = format_file_size(os.path.getsize(destination))
        console.print(f"[dim]Size: {before} → {after}[/dim]")
    console.print()


@cli.command(name="text")
@click.argument('input_pdf', type=click.Path())
@click.option(
    '--output', '-o',
    default=None,
    help='Write text to this file instead of stdout',
    type=click.Path()
)
def extract_text(input_pdf, output):
    """
    Extract plain text with pdftotext.

    Examples:

        pdfcli text input.pdf

        pdfcli text input.pdf -o input.txt
    """
    try:
        text = operations.extract_text(input_pdf, output)
    except PdfCliError as e:
        _fail(e)

    if output is None:
        click.echo(text, nl=False)
    else:
        console.print(f"\n[bold green]✓ Text written to:[/bold green] {output}")
        console.print()


@cli.command(name="validate")
@click.argument('input_pdf', type=click.Path())
def validate(input_pdf):
    """
    Check that an input file exists.

    Example:

        pdfcli validate input.pdf
    """
    try:
        path = operations.validate_input(input_pdf)
    except PdfCliError as e:
        _fail(e)

    console.print(f"OK: {path}", highlight=False)


@cli.command(name="tools")
def tools():
    """
    Show how each external tool resolves.

    Example:

        pdfcli tools
    """
    table = Table(title="External Tools")
    table.add_column("Tool", style="cyan", no_wrap=True)
    table.add_column("Override", style="dim")
    table.add_column("Status")

    missing = []
    for tool, status in tool_status().items():
        if isinstance(status, MissingToolError):
            missing.append(status)
            table.add_row(tool.spec.name, tool.spec.env_key, "[red]✗ not found[/red]")
        else:
            table.add_row(tool.spec.name, tool.spec.env_key, f"[green]✓ {status}[/green]")

    console.print()
    console.print(table)
    for error in missing:
        console.print()
        console.print(error.hint, markup=False, highlight=False)
    console.print()


if __name__ == '__main__':
    cli()
