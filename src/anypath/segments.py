"""Segment model: splitting, classification and signed indexing of path strings.

A parsed path is an ordered tuple of segments. Absolute paths carry an anchor
segment at position 0: ``""`` for Unix-style roots and ``"C:"`` for drives.
Relative paths have no anchor, so their first segment sits at position 0.

Public indices are 0-anchored and signed:
- ``0`` is the anchor (absent for relative paths)
- ``k >= 1`` is the k-th name, counting from 1
- ``-k`` is the k-th name from the end; the anchor is never reachable this way
"""

from __future__ import annotations

import dataclasses
import enum
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

CURRENT = "."
PARENT = ".."

_SPLIT_RE = re.compile(r"[\\/]+")
_DRIVE_RE = re.compile(r"^[A-Za-z]:$")
_DOS_RE = re.compile(r"^[A-Za-z]:(?:[\\/]|$)")
_ROOT_RE = re.compile(r"^(?:[A-Za-z]:)?[\\/]*$")


class PathKind(enum.StrEnum):
    """Classification of a path string."""

    ROOT = "root"
    ABSOLUTE_UNIX = "absolute-unix"
    ABSOLUTE_DOS = "absolute-dos"
    RELATIVE = "relative"


def split(raw: str) -> list[str]:
    """Split on runs of either separator. '' yields a single empty segment."""
    return _SPLIT_RE.split(raw)


def is_drive(segment: str) -> bool:
    """Check if a segment is a drive token like 'C:' (any case)."""
    return _DRIVE_RE.match(segment) is not None


def ends_with_separator(raw: str) -> bool:
    return raw.endswith(("/", "\\"))


def classify(raw: str) -> PathKind:
    """Classify a raw path string by its leading characters."""
    if raw and _ROOT_RE.match(raw):
        return PathKind.ROOT
    if _DOS_RE.match(raw):
        return PathKind.ABSOLUTE_DOS
    if raw.startswith(("/", "\\")):
        return PathKind.ABSOLUTE_UNIX
    return PathKind.RELATIVE


@dataclasses.dataclass(frozen=True)
class SegmentModel:
    """Parsed, unnormalized view over a path string."""

    segments: tuple[str, ...]
    kind: PathKind

    @classmethod
    def parse(cls, raw: str) -> SegmentModel:
        """Parse a raw string. Drive tokens are uppercased; empty names are dropped."""
        kind = classify(raw)
        parts = split(raw)
        if kind is PathKind.RELATIVE:
            names = tuple(p for p in parts if p)
            return cls(names or (CURRENT,), kind)

        anchor = parts[0].upper() if is_drive(parts[0]) else ""
        names = tuple(p for p in parts[1:] if p)
        return cls((anchor, *names), kind)

    @classmethod
    def from_parts(cls, parts: Sequence[str], *, absolute: bool) -> SegmentModel:
        """Build from already-split segments without re-reading them as a string.

        For an absolute path ``parts[0]`` is the anchor. A relative path with no
        parts is the current directory.
        """
        if not absolute:
            return cls(tuple(parts) or (CURRENT,), PathKind.RELATIVE)
        if len(parts) == 1:
            kind = PathKind.ROOT
        else:
            kind = PathKind.ABSOLUTE_DOS if parts[0] else PathKind.ABSOLUTE_UNIX
        return cls(tuple(parts), kind)

    @property
    def is_root(self) -> bool:
        return self.kind is PathKind.ROOT

    @property
    def is_absolute(self) -> bool:
        return self.kind is not PathKind.RELATIVE

    @property
    def is_relative(self) -> bool:
        return self.kind is PathKind.RELATIVE

    @property
    def anchor(self) -> str | None:
        """The root/drive segment, or None for relative paths."""
        return self.segments[0] if self.is_absolute else None

    @property
    def is_dos(self) -> bool:
        return self.is_absolute and self.segments[0] != ""

    @property
    def is_unix(self) -> bool:
        return self.is_absolute and self.segments[0] == ""

    @property
    def drive(self) -> str | None:
        """The uppercased drive letter of a DOS path."""
        return self.segments[0][0] if self.is_dos else None

    @property
    def names(self) -> tuple[str, ...]:
        """All segments except the anchor."""
        return self.segments[1:] if self.is_absolute else self.segments

    @property
    def depth(self) -> int:
        return len(self.names)

    def resolve_index(self, index: int) -> int | None:
        """Map a signed, 0-anchored index to a position in ``segments``.

        Returns None when the index does not address a segment. This is the
        single place where anchor offsets are computed.
        """
        offset = 1 if self.is_absolute else 0
        depth = len(self.segments) - offset
        if index == 0:
            return 0 if self.is_absolute else None
        if index > 0:
            return index - 1 + offset if index <= depth else None
        return len(self.segments) + index if -index <= depth else None

    def position_to_index(self, position: int) -> int:
        """Inverse of resolve_index for non-negative indices."""
        return position if self.is_absolute else position + 1

    def get_element(self, index: int) -> str | None:
        position = self.resolve_index(index)
        return None if position is None else self.segments[position]
