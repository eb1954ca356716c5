from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0-dev"

# Public API - the Path value type, its options and the error taxonomy.
# Lower layers (segments, normalizer, search, environ) are reachable via
# their full module paths.

if TYPE_CHECKING:
    from anypath.config.models import BoundaryPolicy as BoundaryPolicy
    from anypath.config.models import FormatOptions as FormatOptions
    from anypath.exceptions import AnyPathError as AnyPathError
    from anypath.normalizer import normalize as normalize
    from anypath.path import Path as Path
    from anypath.segments import PathKind as PathKind

# Lazy import mapping for runtime
_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "AnyPathError": ("anypath.exceptions", "AnyPathError"),
    "BoundaryPolicy": ("anypath.config.models", "BoundaryPolicy"),
    "FormatOptions": ("anypath.config.models", "FormatOptions"),
    "Path": ("anypath.path", "Path"),
    "PathKind": ("anypath.segments", "PathKind"),
    "normalize": ("anypath.normalizer", "normalize"),
}


def __getattr__(name: str) -> object:
    """Lazily import public API members on first access."""
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        import importlib

        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        # Cache in module globals for subsequent access
        globals()[name] = value
        return value
    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)


def __dir__() -> list[str]:
    """List available attributes including lazy imports."""
    return list(globals().keys()) + list(_LAZY_IMPORTS.keys())
