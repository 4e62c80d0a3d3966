"""
Pytest configuration file.

Ensures src/ is on sys.path so that 'import csv2json...' works without an
install, and gives every test a clean configuration environment.
"""
import sys
from pathlib import Path

import pytest

# Add src/ to sys.path
src_root = Path(__file__).parent.parent / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from csv2json.config.settings import (  # noqa: E402
    ENVVAR_DEFAULT_FORMAT,
    ENVVAR_ENCODING,
    ENVVAR_INDENT,
    reset_settings,
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Drop CSV2JSON_* variables and the cached settings around each test."""
    for name in (ENVVAR_DEFAULT_FORMAT, ENVVAR_INDENT, ENVVAR_ENCODING):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
