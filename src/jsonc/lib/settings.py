"""Library settings read from the environment.

TIER 1: May import from core only.

Variables:
- JSONC_PRECHECK: "runes" (default) or "slash", see PrecheckMode
- JSONC_LOG_LEVEL: read by lib.logger
"""

import os

from jsonc.core.errors import ConfigError
from jsonc.core.types import PrecheckMode

PRECHECK_ENV = "JSONC_PRECHECK"
DEFAULT_PRECHECK = PrecheckMode.RUNES


def resolve_precheck_mode(
    value: PrecheckMode | str | None = None,
    source: str = "precheck",
) -> PrecheckMode:
    """Parse a pre-check mode, falling back to JSONC_PRECHECK.

    Args:
        value: Mode or mode name. None reads JSONC_PRECHECK.
        source: Name used in the error message.

    Returns:
        Parsed mode, or RUNES if nothing is set.

    Raises:
        ConfigError: If the value names an unknown mode.
    """
    if isinstance(value, PrecheckMode):
        return value
    if value is None:
        value = os.environ.get(PRECHECK_ENV, "")
        source = PRECHECK_ENV
    if not value.strip():
        return DEFAULT_PRECHECK

    try:
        return PrecheckMode.from_value(value)
    except ValueError as e:
        allowed = ", ".join(mode.value for mode in PrecheckMode)
        raise ConfigError(f"Invalid {source}={value!r} (expected one of: {allowed})") from e


def get_precheck_mode() -> PrecheckMode:
    """Get the pre-check mode configured by JSONC_PRECHECK.

    Raises:
        ConfigError: If JSONC_PRECHECK names an unknown mode.
    """
    return resolve_precheck_mode()
