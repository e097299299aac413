"""Reading a text file into a list of lines."""

from __future__ import annotations

from pathlib import Path

from wordindex.log import get_logger

logger = get_logger(__name__)


def get_file_contents(path: str) -> list[str]:
    """Return the file's lines with their trailing newlines removed.

    Raises OSError (e.g. FileNotFoundError) if the file cannot be read;
    nothing is returned in that case.
    """
    text = Path(path).read_text(encoding="utf-8")
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    logger.debug("files.read: path=%s lines=%d", path, len(lines))
    return lines
