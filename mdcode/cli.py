"""
mdcode CLI - Markdown Code Extraction Tool

A command-line tool for generating source files from markdown by:
1. Reading a markdown document
2. Extracting the code blocks matching each output file's language
3. Writing each output file only if its content changed
"""

import logging
from pathlib import Path
from typing import List

import typer
from dotenv import load_dotenv, find_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from mdcode import __version__
from mdcode.errors import MdcodeError
from mdcode.extractor import MarkdownCodeExtractor
from mdcode.extractors import LanguageDetector

load_dotenv(find_dotenv())

app = typer.Typer(
    name="mdcode",
    help="Extract fenced code blocks from markdown into source files",
    add_completion=False,
)

console = Console()


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def extract(
    outputs: List[str] = typer.Argument(..., help="Output file names (e.g., main.go style.css)"),
    input_path: str = typer.Option(..., "--input", "-i", help="Markdown file, relative to --root"),
    root: str = typer.Option(".", "--root", "-r", envvar="MDCODE_ROOT", help="Root directory for --input"),
    dest: str = typer.Option(..., "--dest", "-d", envvar="MDCODE_DEST", help="Destination directory for outputs"),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
):
    """
    Extract code blocks from a markdown file into one or more output files.

    The extension of each output file selects the code blocks to extract
    (.go -> ```go, .js -> ```javascript, .css -> ```css).

    Example:
        mdcode extract main.go style.css \\
            --input docs/README.md \\
            --dest web
    """
    _configure_logging(verbose)

    extractor = MarkdownCodeExtractor(root_dir=Path(root), destination=dest).input_path(input_path)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Output")
    table.add_column("Language")
    table.add_column("Blocks", justify="right")
    table.add_column("Status")

    failed = False
    for output in outputs:
        try:
            result = extractor.extract(output)
        except MdcodeError as e:
            console.print(f"[red]❌ {output}: {e}[/red]")
            failed = True
            continue

        status = "[green]written[/green]" if result.written else "[dim]up to date[/dim]"
        table.add_row(result.output_path, result.language, str(result.block_count), status)

    if table.row_count:
        console.print(table)

    if failed:
        raise typer.Exit(1)


@app.command()
def languages():
    """List supported output file extensions."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Extension")
    table.add_column("Code block tag")

    for ext, tag in LanguageDetector().supported_extensions().items():
        table.add_row(ext, tag)

    console.print(table)


@app.command()
def version():
    """Show the version of mdcode."""
    console.print(f"[bold cyan]mdcode[/bold cyan] v{__version__}")
    console.print("Markdown Code Extraction Tool")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
