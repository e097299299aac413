"""Text report for an index: one line per word, ranges in ascending order.

    brown           : [2,2]
    fox             : [1,2]
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console

WORD_COLUMN_WIDTH = 15

console = Console(soft_wrap=True)


def format_ranges(ranges: Iterable[list[int]]) -> str:
    return ",".join(f"[{start},{end}]" for start, end in ranges)


def format_entry(entry: tuple[str, list[list[int]]], width: int = WORD_COLUMN_WIDTH) -> str:
    word, ranges = entry
    return f"{word:<{width}} : {format_ranges(ranges)}"


def format_index(index: Iterable[tuple[str, list[list[int]]]], width: int = WORD_COLUMN_WIDTH) -> list[str]:
    return [format_entry(entry, width) for entry in index]


def print_line(line: str) -> None:
    """Write `line` to stdout unchanged (no tab expansion, no markup)."""
    console.file.write(line + "\n")


def show_index(index: Iterable[tuple[str, list[list[int]]]]) -> None:
    """Print the report for an index.  The whole report is formatted first."""
    for line in format_index(index):
        print_line(line)


def show_file_contents(lines: Iterable[str]) -> None:
    for line in lines:
        print_line(line)
