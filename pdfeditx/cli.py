"""
Command-line interface for pdfeditx.
"""

import os
import sys
from dataclasses import replace
from pathlib import Path
from typing import Iterable, List

import click
from rich.console import Console
from rich.table import Table

from pdfeditx import __version__
from pdfeditx.config import EditorSettings
from pdfeditx.exceptions import InvalidSelectionError, PDFEditError
from pdfeditx.session import EditorSession
from pdfeditx.types import OutputFile, RedactionBox
from pdfeditx.utils import configure_logging, format_file_size, pluralize
from pdfeditx.validators import validate_page_indices
from pdfeditx.workspace import Workspace

console = Console()


def _settings() -> EditorSettings:
    # Thumbnails are never shown in a terminal.
    return replace(EditorSettings.from_env(), render_thumbnails=False)


def _open(input_pdf: str) -> EditorSession:
    return EditorSession.open(input_pdf, settings=_settings())


def parse_page_list(value: str) -> List[int]:
    """
    Parse 1-based page numbers such as ``"1,3,5-7"`` into 0-based indices.

    Raises:
        ValueError: If the text is not a list of numbers and ranges
    """
    indices: List[int] = []
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            if "-" in part:
                start_text, end_text = part.split("-", 1)
                start, end = int(start_text), int(end_text)
                if start > end:
                    raise ValueError
            else:
                start = end = int(part)
        except ValueError:
            raise ValueError(f"Invalid page specification: '{part}'") from None
        if start < 1:
            raise ValueError(f"Page numbers start at 1: '{part}'")
        indices.extend(range(start - 1, end))
    if not indices:
        raise ValueError("No pages given")
    return indices


def parse_box(value: str) -> RedactionBox:
    """
    Parse ``"page:x,y,width,height"`` into a redaction box.

    The page number is 1-based; coordinates are in points from the top-left
    corner of the page.
    """
    try:
        page_text, coords = value.split(":", 1)
        x, y, width, height = (float(item) for item in coords.split(","))
        page = int(page_text)
    except ValueError:
        raise ValueError(f"Invalid redaction box: '{value}'. Expected page:x,y,width,height") from None
    return RedactionBox(page_index=page - 1, x=x, y=y, width=width, height=height)


def _write_outputs(outputs: Iterable[OutputFile], output_dir: str) -> List[Path]:
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    written = []
    for output in outputs:
        path = directory / output.filename
        path.write_bytes(output.data)
        written.append(path)
    return written


def _report(paths: List[Path], output_dir: str) -> None:
    console.print(f"\n[bold green]✓ Successfully created {pluralize(len(paths), 'file')}[/bold green]")
    console.print(f"[dim]Output directory: {os.path.abspath(output_dir)}[/dim]")
    console.print("\n[bold]Created files:[/bold]")
    for path in paths:
        console.print(f"  • {path.name}")
    console.print()


def _fail(error: Exception) -> None:
    console.print(f"\n[bold red]✗ Error:[/bold red] {error}")
    sys.exit(1)


output_dir_option = click.option(
    '--output-dir', '-o',
    default='./output',
    help='Output directory',
    type=click.Path()
)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """
    pdfeditx - Extract, split, reorder, delete, redact, compress and merge PDF pages.
    """
    configure_logging(verbose)


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True))
def show_info(input_pdf):
    """
    Display information about a PDF file.

    Example:

        pdfeditx info input.pdf
    """
    try:
        session = _open(input_pdf)

        table = Table(title=f"PDF Information: {session.name}")
        table.add_column("Property", style="cyan", no_wrap=True)
        table.add_column("Value", style="green")

        table.add_row("File Path", os.path.abspath(input_pdf))
        table.add_row("File Size", format_file_size(session.loaded.file_size))
        table.add_row("Number of Pages", str(session.page_count))
        for key, value in session.working_document.metadata.items():
            table.add_row(key.lstrip("/"), value)

        pages = Table(title="Pages")
        pages.add_column("Page", style="cyan", justify="right")
        pages.add_column("Width", style="green", justify="right")
        pages.add_column("Height", style="green", justify="right")
        for page in session.page_infos:
            pages.add_row(str(page.page_number), f"{page.width:g}", f"{page.height:g}")

        console.print()
        console.print(table)
        console.print(pages)
        console.print()

    except PDFEditError as e:
        _fail(e)


@cli.command(name="extract")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option(
    '--pages', '-p',
    required=True,
    help="Pages to extract (e.g., '1,3,5-7')",
    type=str
)
@output_dir_option
def extract(input_pdf, pages, output_dir):
    """
    Extract selected pages into a single PDF.

    Pages are written in document order regardless of the order given.

    Example:

        pdfeditx extract input.pdf --pages 3,1
    """
    try:
        session = _open(input_pdf)
        for index in set(parse_page_list(pages)):
            session.selection.toggle_page_selection(index)

        console.print(f"\n[bold cyan]Extracting pages {pages}...[/bold cyan]")
        output = session.extract()
        _report(_write_outputs([output], output_dir), output_dir)

    except (PDFEditError, ValueError) as e:
        _fail(e)


@cli.command(name="split")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option(
    '--after', '-a',
    required=True,
    help="Split after these pages (e.g., '2,4')",
    type=str
)
@output_dir_option
def split(input_pdf, after, output_dir):
    """
    Split a PDF into parts after the given pages.

    Example:

        pdfeditx split input.pdf --after 2,4
    """
    try:
        session = _open(input_pdf)
        # Splitting after 1-based page k cuts before 0-based page k.
        for point in set(parse_page_list(after)):
            session.selection.toggle_split_point(point + 1)

        console.print(f"\n[bold cyan]Splitting {pluralize(session.page_count, 'page')}...[/bold cyan]")
        outputs = session.split()
        _report(_write_outputs(outputs, output_dir), output_dir)

    except (PDFEditError, ValueError) as e:
        _fail(e)


@cli.command(name="reorder")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option(
    '--order', '-r',
    required=True,
    help="New page order listing every page once (e.g., '3,1,2')",
    type=str
)
@output_dir_option
def reorder(input_pdf, order, output_dir):
    """
    Rearrange the pages of a PDF.

    Example:

        pdfeditx reorder input.pdf --order 3,1,2
    """
    try:
        session = _open(input_pdf)
        session.selection.set_page_order(parse_page_list(order))
        session.apply_page_order()
        _report(_write_outputs([session.download()], output_dir), output_dir)

    except (PDFEditError, ValueError) as e:
        _fail(e)


@cli.command(name="delete")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option(
    '--pages', '-p',
    required=True,
    help="Pages to delete (e.g., '2,4-5')",
    type=str
)
@output_dir_option
def delete(input_pdf, pages, output_dir):
    """
    Remove pages from a PDF.

    Example:

        pdfeditx delete input.pdf --pages 2,4-5
    """
    try:
        session = _open(input_pdf)
        indices = sorted(set(parse_page_list(pages)), reverse=True)
        validate_page_indices(indices, session.page_count)
        if len(indices) >= session.page_count:
            raise InvalidSelectionError("Cannot delete all pages.", values=indices)

        for index in indices:
            session.selection.delete_page(index)
        session.apply_page_order()
        _report(_write_outputs([session.download()], output_dir), output_dir)

    except (PDFEditError, ValueError) as e:
        _fail(e)


@cli.command(name="redact")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option(
    '--box', '-b', 'boxes',
    required=True,
    multiple=True,
    help="Area to black out as page:x,y,width,height (top-left origin, points)",
    type=str
)
@output_dir_option
def redact(input_pdf, boxes, output_dir):
    """
    Paint opaque boxes over areas of a PDF.

    Example:

        pdfeditx redact input.pdf -b 1:72,72,200,40 -b 2:0,0,100,100
    """
    try:
        session = _open(input_pdf)
        for text in boxes:
            session.selection.add_redaction(parse_box(text))

        console.print(f"\n[bold cyan]Applying {pluralize(len(boxes), 'redaction')}...[/bold cyan]")
        session.apply_redactions()
        _report(_write_outputs([session.download()], output_dir), output_dir)

    except (PDFEditError, ValueError) as e:
        _fail(e)


@cli.command(name="compress")
@click.argument('input_pdf', type=click.Path(exists=True))
@output_dir_option
def compress(input_pdf, output_dir):
    """
    Re-encode a PDF with compressed streams.

    Example:

        pdfeditx compress input.pdf -o compressed
    """
    try:
        session = _open(input_pdf)
        result = session.compress()
        paths = _write_outputs([result.output], output_dir)

        table = Table(title="Compression", show_header=False)
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="green")
        table.add_row("Original Size", format_file_size(result.original_size))
        table.add_row("Compressed Size", format_file_size(result.compressed_size))
        table.add_row("Reduction", f"{result.reduction_percent:.1f}%")
        console.print()
        console.print(table)

        _report(paths, output_dir)

    except PDFEditError as e:
        _fail(e)


@cli.command(name="merge")
@click.argument('input_pdfs', nargs=-1, required=True, type=click.Path(exists=True))
@output_dir_option
def merge(input_pdfs, output_dir):
    """
    Merge several PDFs into one, in the order given.

    Example:

        pdfeditx merge first.pdf second.pdf third.pdf
    """
    try:
        workspace = Workspace()
        for input_pdf in input_pdfs:
            workspace.add_document(_open(input_pdf))

        console.print(f"\n[bold cyan]Merging {pluralize(len(workspace), 'document')}...[/bold cyan]")
        output = workspace.merge()
        _report(_write_outputs([output], output_dir), output_dir)

    except PDFEditError as e:
        _fail(e)


if __name__ == '__main__':
    cli()
