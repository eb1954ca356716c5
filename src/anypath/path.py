"""Immutable path value type.

A Path is always stored normalized. Every operation returns a new Path (or a
primitive) and never touches the filesystem. String arguments are coerced
with the receiver's options, so the same boundary policy applies throughout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self, override

from anypath import environ, exceptions, normalizer, search, segments
from anypath.config import models

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from anypath.types import EnvLookup, OptionsInput, PathInput


class Path:
    """Normalized, immutable path string with segment-level operations.

    Example:
        >>> p = Path("c:\\\\Windows///Fonts/../Fonts")
        >>> str(p)
        'C:/Windows/Fonts'
        >>> p.get_element(-1)
        'Fonts'
    """

    _model: segments.SegmentModel
    _options: models.FormatOptions
    _trailing_slash: bool

    def __init__(self, path: PathInput, options: OptionsInput = None) -> None:
        """Create a normalized path.

        Raises:
            EmptyInputError: If the string is empty or whitespace only.
            InvalidSeparatorError: If the separator option is invalid.
            TooManyParentJumpsError: If '..' over-climbs under the 'error' policy.
        """
        if isinstance(path, Path):
            if options is None:
                self._set(path._model, path._options, path._trailing_slash)
                return
            opts = models.resolve_options(options)
            # New options may carry a stricter boundary policy
            model = normalizer.collapse_model(path._model, opts.boundary_policy, path.path)
            self._set(model, opts, _trailing_for(opts, path._trailing_slash))
            return
        if not path.strip():
            raise exceptions.EmptyInputError()
        opts = models.resolve_options(options)
        self._set(normalizer.normalize_model(path, opts), opts, normalizer.wants_trailing_slash(path, opts))

    def _set(self, model: segments.SegmentModel, options: models.FormatOptions, trailing_slash: bool) -> None:
        self._model = model
        self._options = options
        self._trailing_slash = trailing_slash

    @classmethod
    def _from_raw(cls, raw: str, options: OptionsInput = None) -> Self:
        """Build from any string, '' meaning the current directory."""
        opts = models.resolve_options(options)
        instance = cls.__new__(cls)
        instance._set(normalizer.normalize_model(raw, opts), opts, normalizer.wants_trailing_slash(raw, opts))
        return instance

    def _derive(
        self,
        parts: Sequence[str],
        *,
        absolute: bool,
        options: models.FormatOptions | None = None,
    ) -> Self:
        """Build a path from already-collapsed segments, by default with the receiver's options."""
        opts = self._options if options is None else options
        instance = self.__class__.__new__(self.__class__)
        instance._set(segments.SegmentModel.from_parts(parts, absolute=absolute), opts, opts.trailing_slash)
        return instance

    def _coerce(self, other: PathInput) -> Path:
        return other if isinstance(other, Path) else Path(other, self._options)

    # --- value protocol ---

    @override
    def __str__(self) -> str:
        return self.path

    @override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.path!r})"

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._model == other._model

    @override
    def __hash__(self) -> int:
        return hash(self._model)

    def __iter__(self) -> Iterator[str]:
        """Iterate over segments, anchor included."""
        return iter(self._model.segments)

    # --- properties ---

    @property
    def path(self) -> str:
        """Canonical string rendered with the path's own options."""
        return normalizer.render(
            self._model.segments,
            absolute=self._model.is_absolute,
            separator=self._options.separator,
            trailing_slash=self._trailing_slash,
        )

    @property
    def options(self) -> models.FormatOptions:
        return self._options

    @property
    def segments(self) -> tuple[str, ...]:
        return self._model.segments

    @property
    def kind(self) -> segments.PathKind:
        return self._model.kind

    @property
    def is_root(self) -> bool:
        return self._model.is_root

    @property
    def is_absolute(self) -> bool:
        return self._model.is_absolute

    @property
    def is_relative(self) -> bool:
        return self._model.is_relative

    @property
    def is_dos(self) -> bool:
        return self._model.is_dos

    @property
    def is_unix(self) -> bool:
        return self._model.is_unix

    @property
    def depth(self) -> int:
        """Number of segments, not counting the anchor of an absolute path."""
        return self._model.depth

    @property
    def drive(self) -> str | None:
        return self._model.drive

    @property
    def anchor(self) -> str | None:
        return self._model.anchor

    # --- element access ---

    def get_element(self, index: int) -> str | None:
        """Return the segment at a signed index, or None if out of range.

        Index 0 is the anchor ('' or 'C:') and is None for relative paths.
        """
        return self._model.get_element(index)

    def get_parent(self) -> Self | None:
        """Return the path without its last segment.

        None for a root and for a relative path with a single segment
        (including '.' and '..').
        """
        if self.is_root or (self.is_relative and self.depth == 1):
            return None
        return self._derive(self.segments[:-1], absolute=self.is_absolute)

    def get_subpath(self, start: int | None = None, end: int | None = None) -> Self | None:
        """Return the inclusive slice [start, end] using signed indices.

        Omitted bounds default to the first and last segment. A slice that
        includes index 0 of an absolute path stays absolute; any other slice is
        relative. Returns None if a bound is out of range or start > end.
        """
        last = len(self.segments) - 1
        lo = 0 if start is None else self._model.resolve_index(start)
        hi = last if end is None else self._model.resolve_index(end)
        if lo is None or hi is None or lo > hi:
            return None
        return self._derive(self.segments[lo : hi + 1], absolute=self.is_absolute and lo == 0)

    # --- conversion ---

    def to_absolute(self, base: PathInput, options: OptionsInput = None) -> Self:
        """Resolve a relative path against an absolute base.

        Already absolute paths are returned as a copy. '..' segments climb
        across the join boundary according to the boundary policy.

        Raises:
            NotAbsoluteError: If ``base`` is relative.
        """
        opts = self._options if options is None else models.resolve_options(options)
        if self.is_absolute:
            return self.__class__(self, opts)
        base_path = self._coerce(base)
        if base_path.is_relative:
            raise exceptions.NotAbsoluteError(self.path, base_path.path, "absolute")
        # Keep the raw base so base_resolve can see its trailing separator
        base_raw = base if isinstance(base, str) else base_path.path
        return self.__class__.join(base_raw, self.path, options=opts)

    def to_relative(self, base: PathInput, options: OptionsInput = None) -> Self:
        """Strip an absolute base from the front of the path.

        Already relative paths are returned as a copy. The base must be a
        prefix of the path ending at a segment boundary.

        Raises:
            NotAbsoluteError: If ``base`` is relative.
            NotAParentError: If ``base`` is not a prefix of the path.
        """
        opts = self._options if options is None else models.resolve_options(options)
        if self.is_relative:
            return self.__class__(self, opts)
        base_path = self._coerce(base)
        if base_path.is_relative:
            raise exceptions.NotAbsoluteError(self.path, base_path.path, "relative")

        own = self.format({"separator": "/"})
        prefix = base_path.format({"separator": "/"})
        at_boundary = len(own) == len(prefix) or prefix.endswith("/") or own[len(prefix) : len(prefix) + 1] == "/"
        if not own.startswith(prefix) or not at_boundary:
            raise exceptions.NotAParentError(self.path, base_path.path)
        return self._derive(self.segments[len(base_path.segments) :], absolute=False, options=opts)

    def format(self, options: OptionsInput = None) -> str:
        """Render the path with a different separator or trailing slash.

        Without options the path's own rendering is returned.

        Raises:
            InvalidSeparatorError: If the separator is not '/' or '\\'.
        """
        if options is None:
            return self.path
        opts = models.resolve_options(options)
        return normalizer.render(
            self.segments,
            absolute=self.is_absolute,
            separator=opts.separator,
            trailing_slash=_trailing_for(opts, self._trailing_slash),
        )

    # --- comparison ---

    def equals(self, other: object) -> bool:
        """Compare with a Path or a string after normalization; False for anything else."""
        if isinstance(other, str):
            other = Path._from_raw(other, self._options)
        if not isinstance(other, Path):
            return False
        return self._model == other._model

    def starts_with(self, other: PathInput) -> bool:
        """Segment-wise prefix check ('/var/www' starts with '/var', not with '/va')."""
        needle = self._coerce(other).segments
        return search.matches_at(self.segments, needle, 0)

    def ends_with(self, other: PathInput) -> bool:
        """Segment-wise suffix check."""
        needle = self._coerce(other).segments
        return search.matches_at(self.segments, needle, len(self.segments) - len(needle))

    def is_child_of(self, other: PathInput) -> bool:
        parent = self.get_parent()
        return parent is not None and parent.equals(self._coerce(other))

    def is_parent_of(self, other: PathInput) -> bool:
        return self._coerce(other).is_child_of(self)

    # --- search ---

    def includes(self, other: PathInput) -> bool:
        """Check if ``other`` occurs as a contiguous run of segments."""
        return self.first_index_of(other) != -1

    def first_index_of(self, needle: PathInput, start: int | None = None) -> int:
        """Signed-index position of the first match at or after ``start``, or -1.

        An absolute needle can only match at index 0 of an absolute path.
        """
        lo = 0 if start is None else self._model.resolve_index(start)
        if lo is None:
            return -1
        position = search.find_first(self.segments, self._coerce(needle).segments, lo)
        return -1 if position == -1 else self._model.position_to_index(position)

    def last_index_of(self, needle: PathInput, end: int | None = None) -> int:
        """Signed-index position of the last match starting at or before ``end``, or -1."""
        hi = None if end is None else self._model.resolve_index(end)
        if end is not None and hi is None:
            return -1
        position = search.find_last(self.segments, self._coerce(needle).segments, hi)
        return -1 if position == -1 else self._model.position_to_index(position)

    # --- constructors ---

    @classmethod
    def normalize(cls, path: PathInput, options: OptionsInput = None) -> Self:
        """Normalize a string or Path. '' yields the current directory."""
        if isinstance(path, Path):
            return cls(path, options)
        return cls._from_raw(path, options)

    @classmethod
    def join(cls, *parts: PathInput, options: OptionsInput = None) -> Self:
        """Concatenate parts with the canonical separator, then normalize.

        Empty parts are skipped; no parts yield '.'. Later absolute parts do not
        reset the result ('vendor' + '/bin' is 'vendor/bin'). With
        ``base_resolve`` a part not ending in a separator is treated as a file
        and replaced by the next part, unless it is a bare drive.
        """
        opts = models.resolve_options(options)
        result = ""
        for part in parts:
            text = part.path if isinstance(part, Path) else part
            if not text:
                continue
            is_file = not segments.ends_with_separator(result) and not segments.is_drive(result)
            if opts.base_resolve and result and is_file:
                result = result[: max(result.rfind("/"), result.rfind("\\")) + 1]
            result += (opts.separator if result else "") + text
        return cls._from_raw(result, opts)

    @classmethod
    def expand(
        cls,
        path: str,
        env: Mapping[str, str] | None = None,
        *,
        lookup: EnvLookup | None = environ.os_environ_lookup,
        options: OptionsInput = None,
    ) -> Self:
        """Expand %NAME% and $NAME variables, then normalize.

        Args:
            path: String containing variable references
            env: Overrides consulted before ``lookup``
            lookup: Environment collaborator; None restricts resolution to ``env``
            options: Normalization options

        Example:
            >>> str(Path.expand("%HOME%/$project", {"home": "/home/me", "project": "app"}, lookup=None))
            '/home/me/app'
        """
        return cls._from_raw(environ.substitute(path, env, lookup), options)

    @classmethod
    def find_common_base(cls, *paths: PathInput, options: OptionsInput = None) -> Self | None:
        """Longest shared leading run of segments.

        Returns None when no paths are given, when absolute and relative paths
        are mixed, when absolute paths have different anchors, or when relative
        paths share nothing.
        """
        if not paths:
            return None
        coerced = [p if isinstance(p, Path) else cls(p, options) for p in paths]
        first = coerced[0]
        if any(p.is_absolute != first.is_absolute or p.anchor != first.anchor for p in coerced):
            return None
        prefix = search.common_prefix([p.segments for p in coerced])
        if not prefix:
            return None
        base = first._derive(prefix, absolute=first.is_absolute)
        return base if options is None else cls(base, options)


def _trailing_for(options: models.FormatOptions, had_trailing_slash: bool) -> bool:
    return options.trailing_slash or (options.preserve_slash and had_trailing_slash)
