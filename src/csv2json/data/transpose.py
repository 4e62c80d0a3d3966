"""
Header/row alignment: records in, column mapping (or row objects) out.

**Conceptual**: Record 0 is the header. Every later record contributes the
value at column index c to the output under header[c]. Grouping by column
needs every row, so this works on the fully buffered record list.

**Functionally**:
  - to_map_of_lists: header field -> list of that column's values.
  - to_list_of_maps: one dict per data row, keys in header order.
  - transpose: dispatch on OutputFormat.

Row-shape and duplicate-header policies come from schemas.py.
"""

from collections.abc import Sequence

from csv2json.data.schemas import (
    ColumnMapping,
    OutputFormat,
    Record,
    RecordList,
    check_row_width,
    validate_header,
)


def to_map_of_lists(
    records: Sequence[Record],
    allow_anomalies: bool = False,
) -> ColumnMapping:
    """
    Group data-row values by header field.

    **Functionally**:
      - Creates one key per header field up front, in header order, so a
        header-only input maps every key to an empty list.
      - Appends records[r][c] to mapping[header[c]] for r >= 1, in row order.
      - Short rows leave their missing trailing columns untouched, so column
        lists can differ in length.

    Args:
        records: All records, header first.
        allow_anomalies: Downgrade wide rows and duplicate header names from
                         errors to warnings (see schemas.py).

    Returns:
        ColumnMapping. Empty input returns {}.

    Raises:
        ParseError: On a wide row or duplicate header names in strict mode.

    Example:
        >>> to_map_of_lists([["a", "b"], ["1", "2"], ["3", "4"]])
        {'a': ['1', '3'], 'b': ['2', '4']}
    """
    if not records:
        return {}

    header = records[0]
    validate_header(header, allow_anomalies=allow_anomalies)

    mapping: ColumnMapping = {name: [] for name in header}
    for row_number, row in enumerate(records[1:], start=2):
        row = check_row_width(row, header, row_number, allow_anomalies=allow_anomalies)
        for column_name, value in zip(header, row):
            mapping[column_name].append(value)

    return mapping


def to_list_of_maps(
    records: Sequence[Record],
    allow_anomalies: bool = False,
) -> RecordList:
    """
    Build one object per data row keyed by header field.

    Short rows omit their missing keys. With duplicate header names (anomalies
    allowed) the rightmost column's value wins within a row.

    Example:
        >>> to_list_of_maps([["a", "b"], ["1", "2"], ["3"]])
        [{'a': '1', 'b': '2'}, {'a': '3'}]
    """
    if not records:
        return []

    header = records[0]
    validate_header(header, allow_anomalies=allow_anomalies)

    rows: RecordList = []
    for row_number, row in enumerate(records[1:], start=2):
        row = check_row_width(row, header, row_number, allow_anomalies=allow_anomalies)
        rows.append(dict(zip(header, row)))

    return rows


def transpose(
    records: Sequence[Record],
    output_format: OutputFormat = OutputFormat.MAP_OF_LISTS,
    allow_anomalies: bool = False,
) -> ColumnMapping | RecordList:
    """Convert records to the requested output shape."""
    if output_format is OutputFormat.LIST_OF_MAPS:
        return to_list_of_maps(records, allow_anomalies=allow_anomalies)
    return to_map_of_lists(records, allow_anomalies=allow_anomalies)
