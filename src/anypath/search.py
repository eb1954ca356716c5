"""Segment-wise search helpers. Positions are plain 0-based tuple positions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


def matches_at(haystack: Sequence[str], needle: Sequence[str], position: int) -> bool:
    """Check if ``needle`` occurs in ``haystack`` starting exactly at ``position``."""
    if position < 0 or position + len(needle) > len(haystack):
        return False
    return all(haystack[position + i] == part for i, part in enumerate(needle))


def find_first(haystack: Sequence[str], needle: Sequence[str], start: int = 0) -> int:
    """Position of the first occurrence of ``needle`` at or after ``start``, or -1.

    Every candidate position is tried, so overlapping repeats are found.
    """
    if not needle:
        return -1
    for position in range(max(start, 0), len(haystack) - len(needle) + 1):
        if matches_at(haystack, needle, position):
            return position
    return -1


def find_last(haystack: Sequence[str], needle: Sequence[str], end: int | None = None) -> int:
    """Position of the last occurrence of ``needle`` starting at or before ``end``, or -1."""
    if not needle:
        return -1
    last = len(haystack) - len(needle)
    if end is not None:
        last = min(last, end)
    for position in range(last, -1, -1):
        if matches_at(haystack, needle, position):
            return position
    return -1


def common_prefix(sequences: Iterable[Sequence[str]]) -> list[str]:
    """Longest run of leading items shared by every sequence."""
    prefix: list[str] = []
    for first, *rest in zip(*sequences, strict=False):
        if any(part != first for part in rest):
            break
        prefix.append(first)
    return prefix
