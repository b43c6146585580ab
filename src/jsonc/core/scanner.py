"""JSONC scanner - removes comments from JSON with Comments.

TIER 0: No internal imports, only Python stdlib.

Single left-to-right pass over code points. String literals are tracked
just well enough that // and /* inside them are never taken for comments.
"""

from jsonc.core.errors import InvalidUTF8Error


def valid_utf8(data: bytes | bytearray | memoryview | str) -> bool:
    """Check whether data is well-formed UTF-8 text.

    Args:
        data: Raw bytes, or text that must be encodable as UTF-8
            (no lone surrogates).

    Returns:
        True if data is valid UTF-8.
    """
    try:
        _to_text(data)
    except InvalidUTF8Error:
        return False
    return True


def sanitize(data: bytes | bytearray | memoryview | str) -> bytes | str:
    """Remove all comments from JSONC data.

    The whole input is validated before scanning, so invalid data never
    produces partial output. The input is not modified.

    Args:
        data: JSONC content. Bytes-like input must be UTF-8.

    Returns:
        Content without comments, as bytes for bytes-like input and as
        str for str input.

    Raises:
        InvalidUTF8Error: If data is not valid UTF-8.
    """
    text = _to_text(data)
    result = strip_comments(text)
    if isinstance(data, str):
        return result
    return result.encode("utf-8")


def strip_comments(content: str) -> str:
    """Strip JSONC comments from already decoded content.

    Removes:
    - Single-line comments: // comment
    - Multi-line comments: /* comment */

    Preserves strings containing // or /* sequences and leaves escape
    sequences untouched. Comment delimiters are never copied.

    Args:
        content: JSONC content with comments.

    Returns:
        Content without comments (not validated as JSON).
    """
    result = []
    in_string = False
    in_line_comment = False
    in_block_comment = False
    # Set by one character for the next one only
    pending_escape = False
    pending_slash_or_star = False

    for char in content:
        check_next, pending_slash_or_star = pending_slash_or_star, False
        escaped, pending_escape = pending_escape, False

        if char == "\n":
            in_line_comment = False

        elif char == "\\":
            if in_string and not escaped:
                pending_escape = True

        elif char == '"':
            if in_string:
                if not escaped:
                    in_string = False
            elif not (in_line_comment or in_block_comment):
                in_string = True

        elif char == "/" and not in_string:
            if in_block_comment:
                if check_next:
                    in_block_comment = False
                else:
                    # Stray slash inside a block also starts a line comment,
                    # which outlives the block until the next newline
                    in_line_comment = True
            elif check_next:
                in_line_comment = True
            else:
                pending_slash_or_star = True
            continue

        elif char == "*" and not in_string:
            if in_block_comment:
                # Inside a block only a star can have set check_next
                pending_slash_or_star = True
            elif check_next:
                in_block_comment = True
            continue

        if in_line_comment or in_block_comment:
            continue
        result.append(char)

    return "".join(result)


def _to_text(data: bytes | bytearray | memoryview | str) -> str:
    """Decode data as strict UTF-8, or verify that text can be encoded."""
    try:
        if isinstance(data, str):
            data.encode("utf-8")
            return data
        return bytes(data).decode("utf-8")
    except UnicodeError as e:
        raise InvalidUTF8Error() from e
