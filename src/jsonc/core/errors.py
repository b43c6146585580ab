"""Custom exceptions for jsonc.

TIER 0: No internal imports, only Python stdlib.
"""

INVALID_UTF8_MESSAGE = "jsonc: invalid UTF-8"


class JsoncError(Exception):
    """Base exception for jsonc."""

    pass


class InvalidUTF8Error(JsoncError, ValueError):
    """Input is not valid UTF-8 text."""

    def __init__(self, message: str = INVALID_UTF8_MESSAGE):
        super().__init__(message)


class ConfigError(JsoncError):
    """Configuration error."""

    pass


class UnmarshalTypeError(JsoncError, TypeError):
    """Decoded value cannot populate the target."""

    pass
