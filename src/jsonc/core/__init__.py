"""Core module - errors, types, scanner, detector, ports.

TIER 0: No internal imports, only Python stdlib.

Exports:
- Error types: JsoncError, InvalidUTF8Error, ConfigError, UnmarshalTypeError
- Enums: PrecheckMode
- Scanner: sanitize, strip_comments, valid_utf8
- Detector: has_comment_runes, has_slash
- Ports: DecoderPort, verify_port
"""

from jsonc.core.detect import has_comment_runes, has_slash
from jsonc.core.errors import (
    INVALID_UTF8_MESSAGE,
    ConfigError,
    InvalidUTF8Error,
    JsoncError,
    UnmarshalTypeError,
)
from jsonc.core.ports import DecoderPort, verify_port
from jsonc.core.scanner import sanitize, strip_comments, valid_utf8
from jsonc.core.types import PrecheckMode

__all__ = [
    "INVALID_UTF8_MESSAGE",
    "ConfigError",
    "DecoderPort",
    "InvalidUTF8Error",
    "JsoncError",
    "PrecheckMode",
    "UnmarshalTypeError",
    "has_comment_runes",
    "has_slash",
    "sanitize",
    "strip_comments",
    "valid_utf8",
    "verify_port",
]
