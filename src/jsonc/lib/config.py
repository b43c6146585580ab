"""JSONC configuration files.

TIER 1: May import from core only.

Loads application config files that may contain comments and gives
dot-notation access to their values.
"""

import json
from pathlib import Path
from typing import Any

from jsonc.core.errors import ConfigError, InvalidUTF8Error
from jsonc.lib.decoding import load_path
from jsonc.lib.logger import get_logger

logger = get_logger("config")

# Cache for loaded configs, keyed by resolved path
_config_cache: dict[Path, dict] = {}


def load_config(path: str | Path) -> dict:
    """Load a config file written in JSONC or plain JSON.

    Args:
        path: Path to the config file.

    Returns:
        Configuration dictionary.

    Raises:
        ConfigError: If the file is missing, unreadable, not valid UTF-8,
            not valid JSON after comment removal, or not a JSON object.
    """
    config_path = Path(path).resolve()

    if config_path in _config_cache:
        return _config_cache[config_path]

    try:
        config = load_path(config_path)
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path.name}: {e}") from e
    except (InvalidUTF8Error, UnicodeDecodeError, json.JSONDecodeError) as e:
        # Clean files skip sanitize(), so json.loads reports bad encoding itself
        raise ConfigError(f"Invalid {config_path.name}: {e}") from e

    if not isinstance(config, dict):
        kind = type(config).__name__
        raise ConfigError(f"Invalid {config_path.name}: expected an object, got {kind}")

    logger.info("Loaded config %s (%d keys)", config_path, len(config))
    _config_cache[config_path] = config
    return config


def get(path: str | Path, key: str, default: Any = None) -> Any:
    """Get config value by dot notation.

    Args:
        path: Path to the config file.
        key: Dot-separated key path (e.g., "server.port").
        default: Default value if key not found.

    Returns:
        Config value or default.

    Example:
        get("app.jsonc", "server.host")  # Returns the host
        get("app.jsonc", "server.debug", False)  # Returns False if not set
    """
    config = load_config(path)
    parts = key.split(".")

    value = config
    for part in parts:
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return default

    return value


def clear_cache() -> None:
    """Clear config cache (for testing)."""
    _config_cache.clear()
