"""
Stream boundaries and the end-to-end conversion.

**Conceptual**: This module is the only I/O boundary in the converter. The
pipeline is read everything -> transpose -> render -> write once:
  - Input is fully buffered (column grouping needs every row).
  - The JSON document is fully rendered before anything is written.
  - A ParseError therefore leaves the output untouched: no partial JSON on
    stdout, and an existing --out file is never truncated by a failing run.

**Rule**: The CLI and tests go through these functions rather than calling
read_records/transpose/to_json_text by hand, so the all-or-nothing ordering
lives in one place.
"""

import sys
from pathlib import Path
from typing import BinaryIO, TextIO

from csv2json.data.reader import read_records
from csv2json.data.schemas import (
    DEFAULT_OUTPUT_FORMAT,
    ColumnMapping,
    OutputFormat,
    Record,
    RecordList,
)
from csv2json.data.serializer import DEFAULT_INDENT, to_json_text, write_json
from csv2json.data.transpose import transpose


def read_input(
    path: Path | str | None = None,
    encoding: str = "utf-8",
) -> list[Record]:
    """
    Read and decode all CSV records from a file or from standard input.

    Args:
        path: Input file. None reads standard input (as bytes, decoded with
              `encoding`).
        encoding: Input text encoding.

    Returns:
        All records, header first.

    Raises:
        FileNotFoundError: If `path` doesn't exist.
        ParseError: If the input is malformed.
        OSError: On read failure.
    """
    if path is None:
        return read_records(sys.stdin.buffer, encoding=encoding)

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(
            f"Input CSV not found: {path}. "
            f"Ensure the file exists and the path is correct."
        )

    with path.open("rb") as f:
        return read_records(f, encoding=encoding)


def write_output(text: str, path: Path | str | None = None) -> None:
    """
    Write the rendered document to a file or to standard output.

    The file is opened only here, after conversion has already succeeded.
    Parent directories are created if needed. Both destinations receive
    UTF-8 bytes.

    Raises:
        OSError: If the file can't be written (permissions, disk full, etc.).
    """
    if path is None:
        # UTF-8 regardless of the terminal/locale encoding, like the file branch
        sys.stdout.flush()
        sys.stdout.buffer.write(text.encode("utf-8"))
        sys.stdout.buffer.flush()
        return

    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OSError(f"{path}: Failed to write JSON. Error: {e}") from e


def convert_records(
    records: list[Record],
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT,
    pretty: bool = False,
    allow_anomalies: bool = False,
    indent: int = DEFAULT_INDENT,
) -> str:
    """Transpose already-decoded records and render them as JSON text."""
    result: ColumnMapping | RecordList = transpose(
        records,
        output_format=output_format,
        allow_anomalies=allow_anomalies,
    )
    return to_json_text(result, pretty=pretty, indent=indent)


def convert_text(
    text: str,
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT,
    pretty: bool = False,
    allow_anomalies: bool = False,
    indent: int = DEFAULT_INDENT,
) -> str:
    """
    Convert CSV text to JSON text.

    Example:
        >>> convert_text("a,b\\n1,2\\n3,4\\n")
        '{"a":["1","3"],"b":["2","4"]}'
        >>> convert_text("")
        '{}'
    """
    return convert_records(
        read_records(text),
        output_format=output_format,
        pretty=pretty,
        allow_anomalies=allow_anomalies,
        indent=indent,
    )


def convert_stream(
    source: TextIO | BinaryIO,
    sink: TextIO,
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT,
    pretty: bool = False,
    allow_anomalies: bool = False,
    indent: int = DEFAULT_INDENT,
    encoding: str = "utf-8",
) -> None:
    """
    Read CSV from `source` and write JSON to `sink`.

    Nothing is written to `sink` unless the whole conversion succeeds.

    Raises:
        ParseError: On malformed input (sink untouched).
        OSError: On read or write failure.
    """
    result = transpose(
        read_records(source, encoding=encoding),
        output_format=output_format,
        allow_anomalies=allow_anomalies,
    )
    write_json(result, sink, pretty=pretty, indent=indent)
