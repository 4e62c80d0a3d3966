"""
Record/output contracts and the header and row-shape checks.

**Conceptual**: This module defines the shapes that flow through the converter:
  - A Record is one parsed CSV row (ordered list of string fields).
  - The first Record is the header; its fields become JSON keys.
  - The output is either a ColumnMapping (header field -> column values) or a
    list of row objects (header field -> value, one dict per data row).

**Row-shape policy**:
  - Rows SHORTER than the header are always accepted; missing trailing columns
    simply get no value for that row.
  - Rows WIDER than the header are a ParseError unless anomalies are allowed,
    in which case the excess fields are dropped with a warning.
  - Duplicate header names are a ParseError unless anomalies are allowed, in
    which case same-named columns share one output key.

All checks raise ParseError with enough context (row number, field counts,
offending names) to fix the input by hand.
"""

import sys
from collections import Counter
from enum import Enum

# One parsed CSV row
Record = list[str]

# Header field -> that column's values, in row-encounter order
ColumnMapping = dict[str, list[str]]

# One dict per data row
RecordList = list[dict[str, str]]


class ParseError(Exception):
    """
    Raised when CSV input is malformed or a row violates the shape policy.

    **Conceptual**: Covers unterminated or misplaced quotes, undecodable bytes,
    and (in strict mode) rows wider than the header or a header with duplicate
    names. The conversion is all-or-nothing, so this error always halts
    processing before any output is written.

    Attributes:
        line_number: 1-based physical input line (reader errors), or None.
        row_number: 1-based record number, header = 1 (row-shape errors),
                    or None. Blank lines and quoted newlines make the two differ.
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        row_number: int | None = None,
    ):
        self.line_number = line_number
        self.row_number = row_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        elif row_number is not None:
            message = f"row {row_number}: {message}"
        super().__init__(message)


class OutputFormat(Enum):
    """
    JSON output shapes.

    MAP_OF_LISTS: {"a": ["1", "3"], "b": ["2", "4"]}
    LIST_OF_MAPS: [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]
    """

    MAP_OF_LISTS = "map-of-lists"
    LIST_OF_MAPS = "list-of-maps"

    @property
    def short_name(self) -> str:
        return "".join(word[0] for word in self.value.split("-"))

    @classmethod
    def from_name(cls, name: str) -> "OutputFormat":
        """
        Resolve a format name or one of its aliases.

        Accepted spellings (case-insensitive):
          - "map-of-lists", "mol", "m"
          - "list-of-maps", "lom", "l"

        Raises:
            ValueError: If the name matches no format.
        """
        wanted = name.strip().lower()
        for fmt in cls:
            if wanted in (fmt.value, fmt.short_name, fmt.value[0]):
                return fmt
        raise ValueError(f"Unknown format string: {name}")


DEFAULT_OUTPUT_FORMAT = OutputFormat.MAP_OF_LISTS


def warn(message: str) -> None:
    """Print an anomaly warning to stderr."""
    print(f"Warning: {message}", file=sys.stderr)


def validate_header(header: Record, allow_anomalies: bool = False) -> None:
    """
    Check that header field names are unique.

    Args:
        header: The first record of the input.
        allow_anomalies: If True, duplicates produce a warning instead of an
                         error; callers then merge same-named columns.

    Raises:
        ParseError: If a name appears more than once and anomalies are not allowed.
    """
    duplicates = [name for name, count in Counter(header).items() if count > 1]
    if not duplicates:
        return

    message = f"Duplicate header names: {duplicates}"
    if allow_anomalies:
        warn(f"{message}; values of same-named columns are merged")
        return
    raise ParseError(message, row_number=1)


def check_row_width(
    row: Record,
    header: Record,
    row_number: int,
    allow_anomalies: bool = False,
) -> Record:
    """
    Apply the row-width policy to a data row.

    Args:
        row: A data record.
        header: The header record.
        row_number: 1-based record number (the header is record 1), for messages.
        allow_anomalies: If True, excess fields are dropped with a warning.

    Returns:
        The row, truncated to the header width when it was wider and anomalies
        are allowed. Shorter rows are returned unchanged.

    Raises:
        ParseError: If the row is wider than the header and anomalies are not allowed.
    """
    if len(row) <= len(header):
        return row

    message = (
        f"Found {len(row)} fields, header has {len(header)}; "
        f"item outside of expected bounds at index {len(header)}"
    )
    if not allow_anomalies:
        raise ParseError(message, row_number=row_number)

    warn(f"row {row_number}: {message}; excess fields ignored")
    return row[: len(header)]
