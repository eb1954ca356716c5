from typing import override


class AnyPathError(Exception):
    """Base exception for anypath errors."""

    def format_user_message(self) -> str:
        """Format a user-friendly error message."""
        return str(self)

    def get_suggestion(self) -> str | None:
        """Return actionable suggestion for resolving the error."""
        return None


class EmptyInputError(AnyPathError):
    """Raised when a path is constructed from an empty string."""

    def __init__(self) -> None:
        super().__init__("Cannot create a path: the string is empty")

    @override
    def get_suggestion(self) -> str:
        return "Use '.' to refer to the current directory"

    @override
    def __reduce__(self) -> tuple[type, tuple[()]]:
        return (self.__class__, ())


class InvalidSeparatorError(AnyPathError):
    """Raised when a separator other than '/' or '\\' is requested."""

    separator: str

    def __init__(self, separator: str) -> None:
        self.separator = separator
        super().__init__(f"Invalid separator {separator!r}: only '/' and '\\' are allowed")

    @override
    def __reduce__(self) -> tuple[type, tuple[str]]:
        return (self.__class__, (self.separator,))


class NotAbsoluteError(AnyPathError):
    """Raised when an operation requires an absolute base but got a relative one."""

    path: str
    base: str
    target: str

    def __init__(self, path: str, base: str, target: str) -> None:
        self.path = path
        self.base = base
        self.target = target
        super().__init__(
            f"Cannot convert the path '{path}' to {target}: the base '{base}' is not absolute"
        )

    @override
    def get_suggestion(self) -> str:
        return "Pass a base that starts with a separator or a drive letter"

    @override
    def __reduce__(self) -> tuple[type, tuple[str, str, str]]:
        return (self.__class__, (self.path, self.base, self.target))


class NotAParentError(AnyPathError):
    """Raised when to_relative() is given a base that does not contain the path."""

    path: str
    base: str

    def __init__(self, path: str, base: str) -> None:
        self.path = path
        self.base = base
        super().__init__(
            f"Cannot convert the path '{path}' to relative: the base '{base}' is not a parent of the path"
        )

    @override
    def __reduce__(self) -> tuple[type, tuple[str, str]]:
        return (self.__class__, (self.path, self.base))


class TooManyParentJumpsError(AnyPathError):
    """Raised when '..' climbs above the root or the start of a relative path."""

    path: str

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Cannot resolve path '{path}': too many parent jumps")

    @override
    def get_suggestion(self) -> str:
        return "Use boundary_policy='clamp' or 'retain' to tolerate extra '..' segments"

    @override
    def __reduce__(self) -> tuple[type, tuple[str]]:
        return (self.__class__, (self.path,))


class ConfigError(AnyPathError):
    """Base class for configuration errors."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when an option value fails validation."""

    pass
