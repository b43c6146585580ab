"""Tests for lib/logger.py and the log lines jsonc modules emit."""

import io
import logging

import pytest

from jsonc.lib import config, decoding
from jsonc.lib.logger import DEFAULT_FORMAT, get_logger, set_log_level


@pytest.fixture
def captured_decoding_log():
    """Redirect jsonc.decoding output to a buffer at DEBUG level."""
    handler = decoding.logger.handlers[0]
    buffer = io.StringIO()
    previous_stream = handler.setStream(buffer)
    previous_level = decoding.logger.level
    decoding.logger.setLevel(logging.DEBUG)
    yield buffer
    decoding.logger.setLevel(previous_level)
    handler.setStream(previous_stream)


class TestGetLogger:
    """Tests for get_logger()."""

    def test_module_loggers_are_namespaced(self):
        """Package modules should log under jsonc.<module>."""
        assert decoding.logger.name == "jsonc.decoding"
        assert config.logger.name == "jsonc.config"

    def test_returns_cached_module_logger(self):
        """Should hand back the logger a module already created."""
        assert get_logger("decoding") is decoding.logger

    def test_single_stderr_handler_with_format(self):
        """Should attach one stream handler using the package format."""
        logger = get_logger("handler_check")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert logger.handlers[0].formatter._fmt == DEFAULT_FORMAT
        assert logger.propagate is False

    def test_quiet_by_default(self, monkeypatch):
        """New loggers should start at WARNING without JSONC_LOG_LEVEL."""
        monkeypatch.delenv("JSONC_LOG_LEVEL", raising=False)
        assert get_logger("default_level").level == logging.WARNING

    def test_level_from_environment(self, monkeypatch):
        """Should honour JSONC_LOG_LEVEL regardless of case."""
        monkeypatch.setenv("JSONC_LOG_LEVEL", "debug")
        assert get_logger("env_level").level == logging.DEBUG

    def test_unknown_environment_level_falls_back(self, monkeypatch):
        """Should fall back to WARNING for an unknown level name."""
        monkeypatch.setenv("JSONC_LOG_LEVEL", "chatty")
        assert get_logger("unknown_level").level == logging.WARNING

    def test_explicit_level_wins(self, monkeypatch):
        """Should prefer the level argument over JSONC_LOG_LEVEL."""
        monkeypatch.setenv("JSONC_LOG_LEVEL", "DEBUG")
        assert get_logger("explicit_level", level="ERROR").level == logging.ERROR


class TestSetLogLevel:
    """Tests for set_log_level()."""

    def test_retunes_module_loggers(self):
        """Should change the level of decoding and config loggers together."""
        try:
            set_log_level("DEBUG")
            assert decoding.logger.level == logging.DEBUG
            assert config.logger.level == logging.DEBUG
        finally:
            set_log_level("WARNING")

        assert decoding.logger.level == logging.WARNING


class TestDecodingLogLines:
    """Tests for the lines loads() writes to jsonc.decoding."""

    def test_fast_path_line(self, captured_decoding_log):
        """Should report that clean input is decoded as is."""
        decoding.loads(b'{"a": 1}', precheck="runes")

        line = captured_decoding_log.getvalue()
        assert "| DEBUG    | jsonc.decoding | No comments detected, decoding input as is" in line

    def test_sanitize_line_counts_bytes(self, captured_decoding_log):
        """Should report the byte count of input that gets sanitized."""
        decoding.loads(b"[1] // one", precheck="runes")

        assert "Possible comment found, sanitizing 10 bytes" in captured_decoding_log.getvalue()

    def test_sanitize_line_counts_chars_for_text(self, captured_decoding_log):
        """Should count characters for str input."""
        decoding.loads('["ü"] /* c */', precheck="runes")

        assert "sanitizing 13 chars" in captured_decoding_log.getvalue()

    def test_silent_at_default_level(self):
        """Should write nothing when jsonc.decoding is at WARNING."""
        handler = decoding.logger.handlers[0]
        buffer = io.StringIO()
        previous_stream = handler.setStream(buffer)
        previous_level = decoding.logger.level
        decoding.logger.setLevel(logging.WARNING)
        try:
            decoding.loads(b"[1] // one", precheck="runes")
        finally:
            decoding.logger.setLevel(previous_level)
            handler.setStream(previous_stream)

        assert buffer.getvalue() == ""
