"""Comment presence checks used to skip sanitizing clean input.

TIER 0: No internal imports, only Python stdlib.

Both checks are string-oblivious: a URL such as "http://x" inside a JSON
string is reported as a possible comment. They never miss a real one.
"""

import re

# A slash followed by another slash or a star opens a comment
_COMMENT_OPENER = re.compile(r"/[/*]")
_COMMENT_OPENER_BYTES = re.compile(rb"/[/*]")


def has_comment_runes(data: bytes | bytearray | memoryview | str) -> bool:
    """Check whether data contains a comment-opening sequence.

    Scans forward once and stops at the first // or /*. Data is not
    validated as UTF-8: both markers are ASCII and cannot occur inside a
    multi-byte sequence.

    Args:
        data: Raw JSONC bytes or text.

    Returns:
        True if // or /* occurs anywhere in data.
    """
    if isinstance(data, str):
        return _COMMENT_OPENER.search(data) is not None
    return _COMMENT_OPENER_BYTES.search(data) is not None


def has_slash(data: bytes | bytearray | memoryview | str) -> bool:
    """Check whether data contains any slash character."""
    if isinstance(data, str):
        return "/" in data
    if isinstance(data, memoryview):
        data = data.tobytes()
    return b"/" in data
