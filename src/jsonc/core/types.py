"""Core types and enums.

TIER 0: No internal imports, only Python stdlib.
"""

from enum import Enum


class PrecheckMode(str, Enum):
    """Pre-checks deciding whether data must be sanitized before decoding.

    RUNES looks for a comment-opening sequence (// or /*).
    SLASH looks for any slash at all; cheaper, but triggers on every URL.
    """

    RUNES = "runes"
    SLASH = "slash"

    @classmethod
    def from_value(cls, value: str) -> "PrecheckMode":
        """Parse a mode name, ignoring case and surrounding whitespace."""
        return cls(value.strip().lower())
