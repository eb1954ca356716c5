from anypath.config.io import load_options_file
from anypath.config.models import (
    DEFAULT_OPTIONS,
    SEPARATORS,
    BoundaryPolicy,
    FormatOptions,
    resolve_options,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "SEPARATORS",
    "BoundaryPolicy",
    "FormatOptions",
    "load_options_file",
    "resolve_options",
]
