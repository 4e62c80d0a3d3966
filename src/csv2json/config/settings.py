"""
Configuration settings for the converter.

**Conceptual**: Converter defaults come from environment variables, optionally
supplied through a .env file in the working directory. Settings are validated
when loaded, so a bad value fails at startup with a message naming the
variable instead of surfacing halfway through a conversion.

Command-line flags always override these defaults; the settings only decide
what happens when a flag is absent.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from csv2json.data.schemas import DEFAULT_OUTPUT_FORMAT, OutputFormat
from csv2json.data.serializer import DEFAULT_INDENT

# Variables already set in the environment take precedence over .env
load_dotenv(dotenv_path=find_dotenv(usecwd=True))

ENVVAR_DEFAULT_FORMAT = "CSV2JSON_DEFAULT_FORMAT"
ENVVAR_INDENT = "CSV2JSON_INDENT"
ENVVAR_ENCODING = "CSV2JSON_ENCODING"


@dataclass(frozen=True)
class Settings:
    """
    Converter defaults.

    Attributes:
        default_format: Output format used when --format is not given.
        indent: Spaces per nesting level for pretty output (>= 0).
        encoding: Input text encoding used when --encoding is not given.
    """
    default_format: OutputFormat = DEFAULT_OUTPUT_FORMAT
    indent: int = DEFAULT_INDENT
    encoding: str = "utf-8"

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.indent < 0:
            raise ValueError(
                f"{ENVVAR_INDENT} must be non-negative, got: {self.indent}"
            )
        if not self.encoding:
            raise ValueError(f"{ENVVAR_ENCODING} must not be empty")

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load settings from environment variables.

        **Environment variables**:
          - CSV2JSON_DEFAULT_FORMAT (optional): "map-of-lists" / "mol" / "m"
            or "list-of-maps" / "lom" / "l". Defaults to "map-of-lists".
          - CSV2JSON_INDENT (optional): pretty-print indent. Defaults to 2.
          - CSV2JSON_ENCODING (optional): input encoding. Defaults to "utf-8".

        Raises:
            ValueError: If a variable is set to an invalid value.

        Usage example:
            >>> # In .env file:
            >>> # CSV2JSON_DEFAULT_FORMAT=lom
            >>>
            >>> settings = Settings.from_env()
            >>> settings.default_format
            <OutputFormat.LIST_OF_MAPS: 'list-of-maps'>
        """
        format_str = os.getenv(ENVVAR_DEFAULT_FORMAT, DEFAULT_OUTPUT_FORMAT.value)
        indent_str = os.getenv(ENVVAR_INDENT, str(DEFAULT_INDENT))
        encoding = os.getenv(ENVVAR_ENCODING, "utf-8")

        try:
            default_format = OutputFormat.from_name(format_str)
        except ValueError as e:
            raise ValueError(f"{ENVVAR_DEFAULT_FORMAT}: {e}") from e

        try:
            indent = int(indent_str)
        except ValueError:
            raise ValueError(
                f"{ENVVAR_INDENT} must be an integer, got: {indent_str}"
            )

        return cls(
            default_format=default_format,
            indent=indent,
            encoding=encoding.strip(),
        )


_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the settings singleton, loading it from the environment on first call.

    Tests can bypass this by constructing Settings directly, or call
    reset_settings() after changing the environment.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """Clear the cached settings so the next get_settings() reloads them."""
    global _default_settings
    _default_settings = None
