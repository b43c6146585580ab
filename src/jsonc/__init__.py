"""jsonc - strip comments from JSON with Comments and decode it.

Usage:
    import jsonc

    jsonc.sanitize(b'{/* comment */"foo": "bar"}')  # b'{"foo": "bar"}'
    jsonc.loads(b'{"foo": "bar"} // trailing')  # {'foo': 'bar'}
"""

from jsonc.core import (
    INVALID_UTF8_MESSAGE,
    ConfigError,
    DecoderPort,
    InvalidUTF8Error,
    JsoncError,
    PrecheckMode,
    UnmarshalTypeError,
    has_comment_runes,
    has_slash,
    sanitize,
    strip_comments,
    valid_utf8,
)
from jsonc.lib import load, load_config, load_path, loads, needs_sanitize, unmarshal

__version__ = "0.1.0"

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
    "load",
    "load_config",
    "load_path",
    "loads",
    "needs_sanitize",
    "sanitize",
    "strip_comments",
    "unmarshal",
    "valid_utf8",
]
