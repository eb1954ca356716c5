"""Canonicalization of path strings.

Normalization collapses '.' and '..' segments, uppercases drive letters, joins
segments with a single canonical separator and applies the trailing slash
options. The result keeps the kind of the input: an absolute path that loses all
its names becomes a root, and a relative path never turns absolute, so
'a/../c:' renders as './c:' rather than as a drive.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from anypath import exceptions, segments
from anypath.config import models

if TYPE_CHECKING:
    from collections.abc import Sequence

    from anypath.types import OptionsInput


def collapse(
    model: segments.SegmentModel,
    policy: models.BoundaryPolicy,
    raw: str,
) -> list[str]:
    """Collapse '.' and '..' segments of a parsed path.

    Args:
        model: Parsed path
        policy: Behavior for a '..' that cannot climb further
        raw: Original input, reported on TooManyParentJumpsError

    Returns:
        Segments with the anchor (if any) first. Empty for a relative path that
        resolves to the current directory.
    """
    absolute = model.is_absolute
    floor = 1 if absolute else 0
    result = [model.segments[0]] if absolute else []

    for part in model.names:
        if part == segments.CURRENT:
            continue
        if part != segments.PARENT:
            result.append(part)
            continue
        if len(result) > floor and result[-1] != segments.PARENT:
            result.pop()
            continue
        match policy:
            case models.BoundaryPolicy.ERROR:
                raise exceptions.TooManyParentJumpsError(raw)
            case models.BoundaryPolicy.CLAMP:
                pass
            case models.BoundaryPolicy.RETAIN:
                # Nothing to retain above a root
                if not absolute:
                    result.append(segments.PARENT)

    return result


def render(
    parts: Sequence[str],
    *,
    absolute: bool,
    separator: str = "/",
    trailing_slash: bool = False,
) -> str:
    """Join collapsed segments into a string.

    A Unix root renders as the bare separator and a drive root as the drive plus
    separator ('C:/'). Roots never get a second trailing separator. A relative
    path whose first name looks like a drive is prefixed with './'.
    """
    if absolute:
        anchor, names = parts[0], parts[1:]
        text = anchor + separator + separator.join(names)
    else:
        # The current directory has no names
        names = () if tuple(parts) == (segments.CURRENT,) else parts
        text = separator.join(names) or segments.CURRENT
        if names and segments.is_drive(names[0]):
            text = segments.CURRENT + separator + text
    if trailing_slash and names:
        text += separator
    return text


def wants_trailing_slash(raw: str, options: models.FormatOptions) -> bool:
    """Check if the rendered form of ``raw`` should end with a separator."""
    return options.trailing_slash or (options.preserve_slash and segments.ends_with_separator(raw))


def collapse_model(
    model: segments.SegmentModel,
    policy: models.BoundaryPolicy,
    raw: str,
) -> segments.SegmentModel:
    """Collapse a parsed path into a normalized SegmentModel of the same kind."""
    return segments.SegmentModel.from_parts(collapse(model, policy, raw), absolute=model.is_absolute)


def normalize(raw: str, options: OptionsInput = None) -> str:
    """Normalize a path string.

    Example:
        >>> normalize("/a/b/..////d/./c", {"separator": "\\\\", "trailing_slash": True})
        '\\\\a\\\\d\\\\c\\\\'

    Raises:
        InvalidSeparatorError: If the separator option is not '/' or '\\'.
        TooManyParentJumpsError: If '..' over-climbs under the 'error' policy.
    """
    opts = models.resolve_options(options)
    model = normalize_model(raw, opts)
    return render(
        model.segments,
        absolute=model.is_absolute,
        separator=opts.separator,
        trailing_slash=wants_trailing_slash(raw, opts),
    )


def normalize_model(raw: str, options: OptionsInput = None) -> segments.SegmentModel:
    """Normalize a path string into a SegmentModel."""
    opts = models.resolve_options(options)
    return collapse_model(segments.SegmentModel.parse(raw), opts.boundary_policy, raw)
