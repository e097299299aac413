"""Line-number range compression.

A range is a closed interval ``[start, end]`` stored as a two-element list.
For any word the ranges produced here are ascending, disjoint and never
adjacent: consecutive ``[a, b]``, ``[c, d]`` always satisfy ``c > b + 1``.
"""

from __future__ import annotations

from typing import Iterable


def pages_to_ranges(pages: Iterable[int]) -> list[list[int]]:
    """Convert line numbers (any order, repeats allowed) to minimal ranges.

    [1, 1, 2, 2, 4, 4, 5, 5, 5, 5, 7, 7] -> [[1, 2], [4, 5], [7, 7]]
    """
    ranges: list[list[int]] = []
    for page in sorted(set(pages)):
        if ranges and page == ranges[-1][1] + 1:
            ranges[-1][1] = page
        else:
            ranges.append([page, page])
    return ranges


def get_range(pages: list[int]) -> list[int]:
    """Return the first range of an ascending list of line numbers.

    Returns an empty list for empty input.
    """
    if not pages:
        return []
    start = end = pages[0]
    for page in pages[1:]:
        if page - end > 1:
            break
        end = page
    return [start, end]


def flatten_ranges(ranges: Iterable[list[int]]) -> list[int]:
    """Expand ranges back into the line numbers they cover, ascending."""
    pages: list[int] = []
    for start, end in ranges:
        pages.extend(range(start, end + 1))
    return pages
