"""
CSV decoding: text or bytes in, list of records out.

**Conceptual**: This is the only place that understands CSV syntax. It turns
an input stream into an ordered list of Records (lists of string fields) and
leaves every decision about headers and row shape to the transposer.

**Dialect** (fixed, not configurable):
  - Comma delimiter, double-quote quoting.
  - A doubled quote inside a quoted field decodes to one literal quote.
  - Commas, CR and LF inside quotes are field content, not separators.
  - CRLF and LF line endings are both accepted; a trailing newline at end of
    input adds no record.
  - Blank lines produce no record. In a single-column file this means an
    unquoted empty value is dropped; write it as "" to keep it (csv.writer
    already quotes a lone empty field that way).
  - A leading UTF-8 byte-order mark is dropped.

The standard csv module runs in strict mode, so an unterminated quote or a
stray character after a closing quote is an error rather than being silently
absorbed into a field.
"""

import csv
import io
from typing import BinaryIO, TextIO

from csv2json.data.schemas import ParseError, Record

BOM = "\ufeff"


def _parse_lines(lines: TextIO) -> list[Record]:
    reader = csv.reader(lines, delimiter=",", quotechar='"', strict=True)
    records: list[Record] = []
    try:
        for row in reader:
            # Blank line
            if not row:
                continue
            records.append(row)
    except csv.Error as e:
        raise ParseError(f"Malformed CSV: {e}", line_number=reader.line_num) from e
    except UnicodeDecodeError as e:
        raise ParseError(
            f"Input is not valid {e.encoding} text: {e.reason}",
            line_number=reader.line_num + 1,
        ) from e

    if records and records[0] and records[0][0].startswith(BOM):
        records[0][0] = records[0][0][len(BOM):]

    return records


def read_records(
    source: str | TextIO | BinaryIO,
    encoding: str = "utf-8",
) -> list[Record]:
    """
    Decode CSV input into a list of records.

    **Functionally**:
      - A str is parsed directly.
      - A text stream (anything whose read() returns str) is iterated as-is (open files with newline="" so that
        CR inside quoted fields survives).
      - A binary stream is decoded with `encoding` first. The wrapper is
        detached afterwards so the caller's stream stays open.

    The whole input is consumed before returning; nothing downstream can start
    until every row is known.

    Args:
        source: CSV text, a text stream, or a binary stream.
        encoding: Text encoding for binary input (default "utf-8").

    Returns:
        All non-blank records in input order, the header first. Empty input
        returns an empty list.

    Raises:
        ParseError: On malformed quoting or undecodable bytes.
        LookupError: If `encoding` is not a known codec.

    Example:
        >>> read_records('a,b\\n"x,y",2\\n')
        [['a', 'b'], ['x,y', '2']]
    """
    if isinstance(source, str):
        return _parse_lines(io.StringIO(source, newline=""))

    # Any text-mode file object, not only io classes (e.g. SpooledTemporaryFile)
    if isinstance(source.read(0), str):
        return _parse_lines(source)

    text = io.TextIOWrapper(source, encoding=encoding, newline="")
    try:
        return _parse_lines(text)
    finally:
        text.detach()
