"""Port interfaces for external collaborators.

TIER 0: No internal imports, only Python stdlib.

The core never parses JSON. Decoding is delegated to any callable that
satisfies DecoderPort, json.loads being the default.

Usage:
    import json
    from jsonc.core.ports import DecoderPort, verify_port

    assert verify_port(json.loads, DecoderPort)
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DecoderPort(Protocol):
    """Port for JSON decoding.

    Implemented by: json.loads, or any callable taking comment-free JSON
    (bytes or str) and returning the decoded value. Errors it raises are
    passed through to the caller untouched.
    """

    def __call__(self, data: Any) -> Any:
        """Decode strict JSON data."""
        ...


def verify_port(implementation: Any, port: type) -> bool:
    """Verify that an implementation satisfies a port.

    Args:
        implementation: Object to verify.
        port: Protocol class to check against.

    Returns:
        True if implementation satisfies the port.
    """
    return isinstance(implementation, port)
