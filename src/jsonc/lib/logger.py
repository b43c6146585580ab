"""Loggers for the jsonc package.

TIER 1: May import from core only.

Each module logs to its own "jsonc.<module>" logger:
- jsonc.decoding: DEBUG line per loads() call, fast path or sanitize
- jsonc.config: INFO line per config file read from disk

Loggers write to stderr and stay quiet below WARNING unless JSONC_LOG_LEVEL
or set_log_level() says otherwise.
"""

import logging
import os
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

LOG_LEVEL_ENV = "JSONC_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%H:%M:%S"

# One configured logger per module name
_loggers: dict[str, logging.Logger] = {}


def get_logger(name: str, level: LogLevel | None = None) -> logging.Logger:
    """Get the logger for a jsonc module.

    The first call for a name attaches a stderr handler and picks the level;
    later calls return the same logger untouched.

    Args:
        name: Module name, e.g. "decoding" for jsonc.decoding.
        level: Level for a new logger (default: JSONC_LOG_LEVEL or WARNING).

    Returns:
        Logger named "jsonc.<name>" that does not propagate to the root.

    Example:
        $ JSONC_LOG_LEVEL=DEBUG python -c 'import jsonc; jsonc.loads(b"[1] // one")'
        20:55:39 | DEBUG    | jsonc.decoding | Possible comment found, sanitizing 10 bytes
    """
    full_name = f"jsonc.{name}"
    if full_name in _loggers:
        return _loggers[full_name]

    logger = logging.getLogger(full_name)

    # Another setup may already have attached handlers
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        logger.addHandler(handler)

        level_name = level or os.environ.get(LOG_LEVEL_ENV, DEFAULT_LEVEL).upper()
        logger.setLevel(getattr(logging, level_name, logging.WARNING))
        logger.propagate = False

    _loggers[full_name] = logger
    return logger


def set_log_level(level: LogLevel) -> None:
    """Change the level of every jsonc logger created so far.

    Example:
        set_log_level("DEBUG")  # show fast-path/sanitize decisions
    """
    log_level = getattr(logging, level, logging.WARNING)
    for logger in _loggers.values():
        logger.setLevel(log_level)
