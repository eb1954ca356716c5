import enum
from collections.abc import Mapping
from typing import Any, Self

import pydantic
from pydantic.alias_generators import to_camel

from anypath import exceptions

SEPARATORS = ("/", "\\")


class BoundaryPolicy(enum.StrEnum):
    """What to do with a '..' that has nothing left to climb."""

    ERROR = "error"
    CLAMP = "clamp"
    RETAIN = "retain"


class FormatOptions(pydantic.BaseModel):
    """Normalization and rendering options.

    Field names are snake_case; camelCase aliases (trailingSlash, baseResolve, ...)
    are accepted as well.
    """

    model_config = pydantic.ConfigDict(  # pyright: ignore[reportUnannotatedClassAttribute]
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    separator: str = "/"
    trailing_slash: bool = False
    preserve_slash: bool = False
    base_resolve: bool = False
    boundary_policy: BoundaryPolicy = BoundaryPolicy.RETAIN

    @pydantic.field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Only the two path separators may join segments."""
        if v not in SEPARATORS:
            raise ValueError(f"invalid separator {v!r}")
        return v

    @classmethod
    def get_default(cls) -> Self:
        """Get default options."""
        return cls()


DEFAULT_OPTIONS = FormatOptions.get_default()


def resolve_options(options: FormatOptions | Mapping[str, Any] | None = None) -> FormatOptions:
    """Validate options once at the API boundary.

    Raises:
        InvalidSeparatorError: If the separator is neither '/' nor '\\'.
        ConfigValidationError: If any other option is invalid.
    """
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, FormatOptions):
        return options

    try:
        return FormatOptions.model_validate(dict(options))
    except pydantic.ValidationError as e:
        for err in e.errors():
            if err["loc"] and err["loc"][0] == "separator" and err["type"] == "value_error":
                raise exceptions.InvalidSeparatorError(str(err["input"])) from None
        msg = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())
        raise exceptions.ConfigValidationError(f"Invalid path options: {msg}") from None
