from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from anypath.config.models import FormatOptions
    from anypath.path import Path

# Anything a Path can be built from
type PathInput = str | Path

# Options accepted at the API boundary, validated by config.models.resolve_options
type OptionsInput = FormatOptions | Mapping[str, Any] | None


class EnvLookup(Protocol):
    """Environment variable lookup used by expansion.

    Must be synchronous and free of side effects. Returns None when the
    variable is not defined.
    """

    def __call__(self, name: str, case_sensitive: bool) -> str | None: ...
