"""Tests for core/ports.py - decoder port."""

import json

from jsonc.core.ports import DecoderPort, verify_port


class TestDecoderPort:
    """Tests for DecoderPort."""

    def test_json_loads_satisfies_port(self):
        """json.loads should satisfy DecoderPort."""
        assert verify_port(json.loads, DecoderPort)

    def test_decoder_instance_satisfies_port(self):
        """Callable objects should satisfy DecoderPort."""
        assert verify_port(json.JSONDecoder().decode, DecoderPort)

    def test_non_callable_does_not_satisfy_port(self):
        """Plain values should not satisfy DecoderPort."""
        assert not verify_port("json", DecoderPort)
