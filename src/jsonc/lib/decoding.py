"""Decode JSONC data with a standard JSON decoder.

TIER 1: May import from core only.

Data is only sanitized when a pre-check reports a possible comment.
Clean data reaches the decoder as the very same object that was passed in,
except memoryviews, which are copied to bytes first.
"""

import dataclasses
import json
from pathlib import Path
from typing import IO, Any

from jsonc.core.detect import has_comment_runes, has_slash
from jsonc.core.errors import UnmarshalTypeError
from jsonc.core.ports import DecoderPort
from jsonc.core.scanner import sanitize
from jsonc.core.types import PrecheckMode
from jsonc.lib.logger import get_logger
from jsonc.lib.settings import resolve_precheck_mode

logger = get_logger("decoding")

_PRECHECKS = {
    PrecheckMode.RUNES: has_comment_runes,
    PrecheckMode.SLASH: has_slash,
}


def needs_sanitize(
    data: bytes | bytearray | memoryview | str,
    precheck: PrecheckMode | str | None = None,
) -> bool:
    """Check whether data may contain comments.

    Args:
        data: Raw JSONC bytes or text.
        precheck: Pre-check to run (default: from JSONC_PRECHECK).

    Returns:
        True if data must go through sanitize() before decoding.

    Raises:
        ConfigError: If precheck or JSONC_PRECHECK names an unknown mode.
    """
    return _PRECHECKS[resolve_precheck_mode(precheck)](data)


def loads(
    data: bytes | bytearray | memoryview | str,
    *,
    decoder: DecoderPort | None = None,
    precheck: PrecheckMode | str | None = None,
) -> Any:
    """Decode JSONC data.

    Comments are removed first if the pre-check finds a possible one.
    Errors raised by the decoder are not wrapped.

    Args:
        data: JSONC content. Bytes-like input must be UTF-8.
        decoder: JSON decoder (default: json.loads).
        precheck: Pre-check to run (default: from JSONC_PRECHECK).

    Returns:
        Decoded value.

    Raises:
        InvalidUTF8Error: If data needs sanitizing and is not valid UTF-8.
            The decoder is not called.
        ConfigError: If precheck or JSONC_PRECHECK names an unknown mode.
    """
    decode = decoder or json.loads

    # json.loads takes str, bytes and bytearray only
    if isinstance(data, memoryview):
        data = data.tobytes()

    if needs_sanitize(data, precheck):
        unit = "chars" if isinstance(data, str) else "bytes"
        logger.debug("Possible comment found, sanitizing %d %s", len(data), unit)
        data = sanitize(data)
    else:
        logger.debug("No comments detected, decoding input as is")

    return decode(data)


def unmarshal(
    data: bytes | bytearray | memoryview | str,
    target: Any,
    *,
    decoder: DecoderPort | None = None,
    precheck: PrecheckMode | str | None = None,
) -> None:
    """Decode JSONC data into an existing object.

    Population rules:
    - dict: updated with the keys of a decoded object
    - list: contents replaced by a decoded array
    - dataclass instance: fields named by keys of a decoded object are set
    - other objects: existing attributes named by keys are set

    Unknown keys are ignored for dataclasses and plain objects.

    Args:
        data: JSONC content.
        target: Object to populate in place.
        decoder: JSON decoder (default: json.loads).
        precheck: Pre-check to run (default: from JSONC_PRECHECK).

    Raises:
        InvalidUTF8Error: If data is not valid UTF-8.
        UnmarshalTypeError: If the decoded value does not fit target.
    """
    value = loads(data, decoder=decoder, precheck=precheck)
    _populate(target, value)


def load(fp: IO[Any], **kwargs: Any) -> Any:
    """Decode JSONC from a file object opened in binary or text mode.

    Args:
        fp: Readable file object.
        **kwargs: Passed to loads().

    Returns:
        Decoded value.
    """
    return loads(fp.read(), **kwargs)


def load_path(path: str | Path, **kwargs: Any) -> Any:
    """Decode a JSONC file.

    The file is read as bytes so that its encoding is checked by sanitize().

    Args:
        path: Path to the JSONC file.
        **kwargs: Passed to loads().

    Returns:
        Decoded value.
    """
    return loads(Path(path).read_bytes(), **kwargs)


def _populate(target: Any, value: Any) -> None:
    """Copy a decoded value into target."""
    if isinstance(target, list):
        if not isinstance(value, list):
            raise UnmarshalTypeError(f"Cannot unmarshal {type(value).__name__} into list")
        target[:] = value
        return

    if not isinstance(value, dict):
        kind = type(target).__name__
        raise UnmarshalTypeError(f"Cannot unmarshal {type(value).__name__} into {kind}")

    if isinstance(target, dict):
        target.update(value)
        return

    if dataclasses.is_dataclass(target) and not isinstance(target, type):
        names = {field.name for field in dataclasses.fields(target)}
    elif hasattr(target, "__dict__") and not isinstance(target, type):
        names = set(vars(target))
    else:
        raise UnmarshalTypeError(f"Cannot unmarshal into {type(target).__name__}")

    for key, item in value.items():
        if key in names:
            setattr(target, key, item)
