"""Lib module - decoding, config files, logging.

TIER 1: May import from core only.
"""

from jsonc.lib.config import clear_cache, get, load_config
from jsonc.lib.logger import get_logger, set_log_level
from jsonc.lib.settings import get_precheck_mode, resolve_precheck_mode
from jsonc.lib.decoding import load, load_path, loads, needs_sanitize, unmarshal

__all__ = [
    "clear_cache",
    "get",
    "get_logger",
    "get_precheck_mode",
    "load",
    "load_config",
    "load_path",
    "loads",
    "needs_sanitize",
    "resolve_precheck_mode",
    "set_log_level",
    "unmarshal",
]
