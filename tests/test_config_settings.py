"""
Tests for converter settings (csv2json/config/settings.py).

Environment variables are set with monkeypatch; conftest.py clears them and
the cached settings around every test.
"""

import pytest

from csv2json.config.settings import Settings, get_settings, reset_settings
from csv2json.data.schemas import OutputFormat


def test_settings_defaults():
    settings = Settings.from_env()

    assert settings.default_format is OutputFormat.MAP_OF_LISTS
    assert settings.indent == 2
    assert settings.encoding == "utf-8"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("CSV2JSON_DEFAULT_FORMAT", "lom")
    monkeypatch.setenv("CSV2JSON_INDENT", "4")
    monkeypatch.setenv("CSV2JSON_ENCODING", "latin-1")

    settings = Settings.from_env()

    assert settings.default_format is OutputFormat.LIST_OF_MAPS
    assert settings.indent == 4
    assert settings.encoding == "latin-1"


def test_settings_unknown_format(monkeypatch):
    monkeypatch.setenv("CSV2JSON_DEFAULT_FORMAT", "table")

    with pytest.raises(ValueError) as exc_info:
        Settings.from_env()

    assert "CSV2JSON_DEFAULT_FORMAT" in str(exc_info.value)
    assert "Unknown format string: table" in str(exc_info.value)


def test_settings_indent_not_integer(monkeypatch):
    monkeypatch.setenv("CSV2JSON_INDENT", "two")

    with pytest.raises(ValueError) as exc_info:
        Settings.from_env()

    assert "CSV2JSON_INDENT must be an integer" in str(exc_info.value)


def test_settings_negative_indent():
    with pytest.raises(ValueError) as exc_info:
        Settings(indent=-1)

    assert "must be non-negative" in str(exc_info.value)


def test_get_settings_is_cached_until_reset(monkeypatch):
    """Test that get_settings() reloads only after reset_settings()."""
    first = get_settings()
    monkeypatch.setenv("CSV2JSON_INDENT", "8")

    assert get_settings() is first
    assert get_settings().indent == 2

    reset_settings()

    assert get_settings().indent == 8
