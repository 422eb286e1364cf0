"""Substring searches used when reading scene description headers."""

from __future__ import annotations

from collections.abc import Iterable


def find_substring(needle: str, haystack: str) -> int:
    """Return where ``needle`` starts in ``haystack``, or -1.

    The scan resumes after the character that broke a partial match
    rather than backtracking, so a match that overlaps the start of a
    failed partial match is not found. An empty needle never matches.
    """
    if not needle:
        return -1
    size = len(haystack)
    i = 0
    while i < size:
        if haystack[i] == needle[0]:
            j = 0
            while i < size and j < len(needle) and haystack[i] == needle[j]:
                i += 1
                j += 1
            if j == len(needle):
                return i - j
        i += 1
    return -1


def find_any(needles: Iterable[str] | None, haystack: str | None) -> int:
    """Return the position of the first needle, in order, found in ``haystack``.

    Gives -1 when none is found or either argument is missing.
    """
    if needles is None or haystack is None:
        return -1
    for needle in needles:
        position = find_substring(needle, haystack)
        if position != -1:
            return position
    return -1