"""Shared text preprocessing: splitting lines into words and filtering them.

Both the indexer and word lookups normalize text through here, so a word
typed at lookup time matches the form it was indexed under.
"""

from __future__ import annotations

import re
from typing import Iterable, NamedTuple

DELIMITERS = " .,;/\\-?!"

STOP_WORDS = frozenset(
    "a the to with is are be was were these those who what where why how which".split()
)

_DELIMITER_RE = re.compile("[" + re.escape(DELIMITERS) + "]+")


class Token(NamedTuple):
    word: str
    line: int


def normalize(word: str) -> str:
    return word.lower()


def tokenize_line(line: str, line_no: int) -> list[Token]:
    """Split on runs of delimiters → lowercase → tag each word with line_no.

    A trailing single-character word is kept ("fix x" gives "fix" and "x").
    """
    return [Token(normalize(w), line_no) for w in _DELIMITER_RE.split(line) if w]


# ── Filter ──────────────────────────────────────────────────────────

def is_not_empty(token: Token) -> bool:
    return token.word != ""


def is_not_stop_word(token: Token, stop_words: frozenset[str] = STOP_WORDS) -> bool:
    return token.word not in stop_words


def filter_tokens(
    tokens: Iterable[Token],
    stop_words: frozenset[str] = STOP_WORDS,
) -> list[Token]:
    """Drop empty words and stop words.  Never raises."""
    return [t for t in tokens if is_not_empty(t) and is_not_stop_word(t, stop_words)]
