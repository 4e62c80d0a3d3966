"""
JSON rendering for converter output.

Compact output has no whitespace at all and no trailing newline:

    {"a":["1","3"],"b":["2","4"]}

Pretty output indents each level, puts every member and element on its own
line, and ends with a newline. Values are always JSON strings; non-ASCII text
is written as-is (UTF-8) rather than as \\u escapes.
"""

import json
from typing import TextIO

from csv2json.data.schemas import ColumnMapping, RecordList

COMPACT_SEPARATORS = (",", ":")
DEFAULT_INDENT = 2


def to_json_text(
    result: ColumnMapping | RecordList,
    pretty: bool = False,
    indent: int = DEFAULT_INDENT,
) -> str:
    """
    Render converter output as JSON text.

    Args:
        result: ColumnMapping or list of row objects.
        pretty: Indent and break lines when True; most compact form when False.
        indent: Spaces per nesting level in pretty mode.

    Returns:
        The JSON document. Key order follows insertion order (header order).
    """
    if pretty:
        return json.dumps(result, ensure_ascii=False, indent=indent) + "\n"
    return json.dumps(result, ensure_ascii=False, separators=COMPACT_SEPARATORS)


def write_json(
    result: ColumnMapping | RecordList,
    stream: TextIO,
    pretty: bool = False,
    indent: int = DEFAULT_INDENT,
) -> None:
    """
    Render the whole document, then write it to `stream` in one call.

    Raises:
        OSError: Propagated from the stream on write failure.
    """
    stream.write(to_json_text(result, pretty=pretty, indent=indent))
