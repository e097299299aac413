"""windex CLI — line-number word index for a text file.

Three commands: index, show, lookup.
Uses typer for argument parsing and rich for formatted terminal output.
"""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from wordindex.files import get_file_contents
from wordindex.indexer import build_index, create_index, lookup as lookup_word
from wordindex.log import get_logger
from wordindex.report import console, format_entry, print_line, show_file_contents

app = typer.Typer(help="windex: index the words of a text file by line number.")
err_console = Console(stderr=True, soft_wrap=True)
logger = get_logger("wordindex.cli")


def _fail(path: str, exc: Exception) -> NoReturn:
    logger.debug("read failed: path=%s error=%s", path, exc)
    err_console.print(f"[red]Error: cannot read {escape(path)}: {escape(str(exc))}[/red]", highlight=False)
    raise typer.Exit(code=1)


# ── index ───────────────────────────────────────────────────────────


@app.command()
def index(path: str = typer.Argument(..., help="Path to a text file")):
    """Print every word of the file with the line ranges it occurs on."""
    try:
        create_index(path)
    except (OSError, UnicodeDecodeError) as exc:
        _fail(path, exc)


# ── show ────────────────────────────────────────────────────────────


@app.command()
def show(path: str = typer.Argument(..., help="Path to a text file")):
    """Print the file's lines as they are read for indexing."""
    try:
        lines = get_file_contents(path)
    except (OSError, UnicodeDecodeError) as exc:
        _fail(path, exc)
    show_file_contents(lines)


# ── lookup ──────────────────────────────────────────────────────────


@app.command()
def lookup(
    path: str = typer.Argument(..., help="Path to a text file"),
    word: str = typer.Argument(..., help="Word to look up (case-insensitive)"),
):
    """Print the line ranges of a single word."""
    try:
        lines = get_file_contents(path)
    except (OSError, UnicodeDecodeError) as exc:
        _fail(path, exc)

    entry = lookup_word(build_index(lines), word)
    if entry is None:
        console.print(f"[yellow]'{escape(word)}' is not indexed[/yellow]", highlight=False)
        return
    print_line(format_entry(entry))


if __name__ == "__main__":
    app()
