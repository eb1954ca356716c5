"""Environment variable expansion for path strings.

Two syntaxes are recognized:
- ``%NAME%``: Windows style, looked up case-insensitively
- ``$NAME``: Unix style, case-sensitive, ends at a separator, '$' or end of string

Names are resolved against the overrides first and then the lookup
collaborator. Undefined variables expand to an empty string.
"""

from __future__ import annotations

import logging
import os
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from anypath.types import EnvLookup

logger = logging.getLogger(__name__)

_VARIABLE_RE = re.compile(r"%(?P<windows>[^%]+)%|\$(?P<unix>[^\\/$]+)")


def os_environ_lookup(name: str, case_sensitive: bool) -> str | None:
    """Look up a variable in the process environment."""
    value = os.environ.get(name)
    if value is not None or case_sensitive:
        return value
    folded = name.casefold()
    return next((v for k, v in os.environ.items() if k.casefold() == folded), None)


def mapping_lookup(env: Mapping[str, str]) -> EnvLookup:
    """Build a lookup over a fixed mapping, e.g. a fake environment in tests."""

    def lookup(name: str, case_sensitive: bool) -> str | None:
        if name in env:
            return env[name]
        if case_sensitive:
            return None
        folded = name.casefold()
        return next((v for k, v in env.items() if k.casefold() == folded), None)

    return lookup


def resolve_variable(
    name: str,
    case_sensitive: bool,
    overrides: Mapping[str, str] | None,
    lookup: EnvLookup | None,
) -> str:
    """Resolve one variable name, overrides taking precedence over the lookup."""
    if overrides:
        value = mapping_lookup(overrides)(name, case_sensitive)
        if value is not None:
            return value
    if lookup is not None:
        value = lookup(name, case_sensitive)
        if value is not None:
            return value
    logger.debug(f"Variable '{name}' is not defined, expanding to an empty string")
    return ""


def substitute(
    raw: str,
    overrides: Mapping[str, str] | None = None,
    lookup: EnvLookup | None = os_environ_lookup,
) -> str:
    """Replace every variable reference in ``raw``. The result is not normalized.

    Passing ``lookup=None`` restricts resolution to ``overrides``.
    """

    def replace(match: re.Match[str]) -> str:
        if (name := match["windows"]) is not None:
            return resolve_variable(name, False, overrides, lookup)
        return resolve_variable(match["unix"], True, overrides, lookup)

    return _VARIABLE_RE.sub(replace, raw)
