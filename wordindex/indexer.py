"""Indexer: splits lines into words, filters them, groups occurrences by
word and compresses each word's line numbers into ranges.

The top-level `create_index()` runs the whole pipeline over a file and
prints the report: read → tokenize → filter → sort → group → compress → show.
"""

from __future__ import annotations

import bisect
from itertools import groupby
from typing import Iterable, NamedTuple

from wordindex.files import get_file_contents
from wordindex.log import get_logger
from wordindex.ranges import pages_to_ranges
from wordindex.report import show_index
from wordindex.text import STOP_WORDS, Token, filter_tokens, tokenize_line

logger = get_logger(__name__)


class IndexEntry(NamedTuple):
    word: str
    ranges: list[list[int]]


# ── Sorting and grouping ────────────────────────────────────────────

def sort_tokens(tokens: Iterable[Token]) -> list[Token]:
    """Stable sort by word; equal words keep their input order."""
    return sorted(tokens, key=lambda t: t.word)


def group_tokens(tokens: list[Token]) -> list[tuple[str, list[int]]]:
    """Merge adjacent equal-word tokens.  Expects tokens sorted by word.

    Returns [(word, [line, ...]), ...]; line numbers may repeat.
    """
    return [(word, [t.line for t in run]) for word, run in groupby(tokens, key=lambda t: t.word)]


# ── Index building ──────────────────────────────────────────────────

def build_index(
    lines: Iterable[str],
    stop_words: frozenset[str] = STOP_WORDS,
) -> list[IndexEntry]:
    """Index in-memory lines (numbered from 1).

    Returns entries sorted by word, each word once.
    """
    tokens: list[Token] = []
    line_count = 0
    for line_no, line in enumerate(lines, 1):
        tokens.extend(tokenize_line(line, line_no))
        line_count = line_no

    kept = filter_tokens(tokens, stop_words)
    groups = group_tokens(sort_tokens(kept))
    index = [IndexEntry(word, pages_to_ranges(pages)) for word, pages in groups]

    logger.info(
        "index.build: words=%d tokens=%d kept=%d lines=%d",
        len(index), len(tokens), len(kept), line_count,
    )
    return index


def lookup(index: list[IndexEntry], word: str) -> IndexEntry | None:
    """Return the entry for `word`, or None.  `index` must be sorted by word.

    `word` is normalized like indexed text ("Fox." finds "fox"); a query
    that splits into more than one word finds nothing.
    """
    words = tokenize_line(word, 0)
    if len(words) != 1:
        return None
    key = words[0].word
    pos = bisect.bisect_left(index, key, key=lambda e: e.word)
    if pos < len(index) and index[pos].word == key:
        return index[pos]
    return None


# ── Main entry point ───────────────────────────────────────────────

def create_index(path: str) -> None:
    """Index the file at `path` and print the report to stdout.

    OSError from reading the file propagates before anything is printed.
    """
    lines = get_file_contents(path)
    index = build_index(lines)
    show_index(index)
