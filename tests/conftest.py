"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

TESTDATA = Path(__file__).parent / "testdata"

# Not valid anywhere in UTF-8 as a lead byte
INVALID_CHAR = b"\xa5"


@pytest.fixture
def testdata_dir():
    """Return the directory holding JSONC fixtures."""
    return TESTDATA


@pytest.fixture
def commented_json():
    """Return a JSONC document exercising every comment form."""
    return (TESTDATA / "app.jsonc").read_bytes()


@pytest.fixture
def reference_json():
    """Return the hand-sanitized counterpart of commented_json."""
    return (TESTDATA / "app.json").read_bytes()


@pytest.fixture
def invalid_char():
    """Return a byte that makes any document invalid UTF-8."""
    return INVALID_CHAR


@pytest.fixture
def tmp_config(tmp_path):
    """Create a temporary JSONC config file."""
    config_path = tmp_path / "app.jsonc"
    config_path.write_text(
        """{
    // Server settings
    "server": {
        "host": "localhost", /* local only */
        "port": 8080
    },
    "name": "demo" // trailing
}
"""
    )
    return config_path


@pytest.fixture
def clear_config_cache():
    """Clear config cache before and after test."""
    from jsonc.lib.config import clear_cache

    clear_cache()
    yield
    clear_cache()
