"""Main CLI entry point for tiapp."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from lxml import etree
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from tiapp.errors import TiappError, TiappNotFoundError
from tiapp.locator import TIAPP_FILENAME, find_tiapp
from tiapp.tiapp import Tiapp

app = typer.Typer(
    name="tiapp",
    help="Locate and inspect Titanium tiapp.xml project files",
    no_args_is_help=True,
)

console = Console()

# Top-level elements worth showing in the summary, in display order
SUMMARY_FIELDS = ["id", "name", "version", "sdk-version"]


def _configure_logging(verbose: bool):
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug output"),
    ] = False,
):
    """Locate and inspect Titanium tiapp.xml project files."""
    _configure_logging(verbose)


@app.command()
def find(
    start: Annotated[
        Path | None,
        typer.Option(
            "--start",
            "-s",
            help="Directory to start searching from (defaults to cwd)",
        ),
    ] = None,
):
    """Print the path of the nearest tiapp.xml."""
    path = find_tiapp(start)
    if path is None:
        typer.echo(
            f"Error: No {TIAPP_FILENAME} found in this directory or any parent",
            err=True,
        )
        raise typer.Exit(code=1)
    typer.echo(path)


@app.command()
def show(
    path: Annotated[
        Path | None,
        typer.Argument(help="Path to tiapp.xml (found automatically if omitted)"),
    ] = None,
    strict: Annotated[
        bool | None,
        typer.Option(
            "--strict/--lenient",
            help="Fail on malformed XML instead of recovering",
            show_default=False,
        ),
    ] = None,
):
    """Load a tiapp.xml and print a summary of it."""
    try:
        tiapp = Tiapp(path, strict=strict)
        if tiapp.path is None:
            tiapp.load()
    except TiappNotFoundError as e:
        location = f" at {e.data}" if e.data else " in this directory or any parent"
        typer.echo(f"Error: {e.message}{location}", err=True)
        raise typer.Exit(code=1) from e
    except TiappError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1) from e

    table = Table(title=TIAPP_FILENAME, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("path", tiapp.path)
    table.add_row("root", etree.QName(tiapp.root).localname)
    for field in SUMMARY_FIELDS:
        elem = tiapp.root.find(field)
        if elem is not None and elem.text and elem.text.strip():
            table.add_row(field, elem.text.strip())

    console.print(table)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
