"""
Tests for end-to-end conversion and stream boundaries (csv2json/data/io.py).

This module tests:
  - The end-to-end conversion scenarios (compact output, header-only,
    quoted comma, empty input, unterminated quote).
  - Output validity and determinism.
  - All-or-nothing behaviour: no output on ParseError.
  - File and standard-stream reading/writing.

All file tests use temporary directories (via tmp_path fixture).
"""

import io
import json
import sys

import pytest

from csv2json.data.io import (
    convert_records,
    convert_stream,
    convert_text,
    read_input,
    write_output,
)
from csv2json.data.schemas import OutputFormat, ParseError


# ============================================================================
# Conversion scenarios
# ============================================================================

def test_convert_text_two_columns():
    assert convert_text("a,b\n1,2\n3,4\n") == '{"a":["1","3"],"b":["2","4"]}'


def test_convert_text_header_only():
    assert convert_text("a,b\n") == '{"a":[],"b":[]}'


def test_convert_text_quoted_comma():
    result = json.loads(convert_text('a,b\n"x,y",2\n'))

    assert result["a"] == ["x,y"]
    assert result["b"] == ["2"]


def test_convert_text_empty_input():
    assert convert_text("") == "{}"


def test_convert_text_unterminated_quote():
    with pytest.raises(ParseError):
        convert_text('a,b\n"x,2\n')


def test_convert_text_row_errors_report_record_number_not_line():
    """Test that row-shape errors count records, since blank lines shift physical lines."""
    with pytest.raises(ParseError) as exc_info:
        convert_text("\n\na,a\n1,2\n")

    assert exc_info.value.row_number == 1
    assert exc_info.value.line_number is None
    assert str(exc_info.value).startswith("row 1: Duplicate header names")


def test_convert_text_list_of_maps():
    text = convert_text("a,b\n1,2\n", output_format=OutputFormat.LIST_OF_MAPS)

    assert text == '[{"a":"1","b":"2"}]'


def test_convert_text_is_deterministic():
    """Test that converting the same CSV twice gives byte-identical output."""
    csv_text = 'id,name,comment\n1,Ann,"likes ""tea"", cake"\n2,Bo,\n3,Cy,"multi\nline"\n'

    for pretty in (False, True):
        assert convert_text(csv_text, pretty=pretty) == convert_text(csv_text, pretty=pretty)


def test_convert_text_output_parses_back_to_column_mapping():
    csv_text = 'id,name\n1,"Ann, Jr."\n2,"O""Brien"\n'

    result = json.loads(convert_text(csv_text, pretty=True))

    assert result == {"id": ["1", "2"], "name": ["Ann, Jr.", 'O"Brien']}


def test_convert_records_passes_indent():
    text = convert_records([["a"], ["1"]], pretty=True, indent=1)

    assert text == '{\n "a": [\n  "1"\n ]\n}\n'


# ============================================================================
# Stream conversion
# ============================================================================

def test_convert_stream_bytes_in_text_out():
    source = io.BytesIO(b"a,b\n1,2\n3,4\n")
    sink = io.StringIO()

    convert_stream(source, sink)

    assert sink.getvalue() == '{"a":["1","3"],"b":["2","4"]}'


def test_convert_stream_writes_nothing_on_parse_error():
    """Test that a malformed input leaves the sink empty."""
    source = io.BytesIO(b'a,b\n1,2\n"x,2\n')
    sink = io.StringIO()

    with pytest.raises(ParseError):
        convert_stream(source, sink)

    assert sink.getvalue() == ""


def test_convert_stream_wide_row_writes_nothing():
    sink = io.StringIO()

    with pytest.raises(ParseError):
        convert_stream(io.BytesIO(b"a\n1\n2,3\n"), sink)

    assert sink.getvalue() == ""


# ============================================================================
# read_input / write_output
# ============================================================================

def test_read_input_from_file(tmp_path):
    csv_path = tmp_path / "in.csv"
    csv_path.write_bytes(b'a,b\r\n"x\r\ny",2\r\n')

    assert read_input(csv_path) == [["a", "b"], ["x\r\ny", "2"]]


def test_read_input_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError) as exc_info:
        read_input(tmp_path / "missing.csv")

    assert "Input CSV not found" in str(exc_info.value)


def test_read_input_from_stdin(monkeypatch):
    fake_stdin = io.TextIOWrapper(io.BytesIO("a\nJosé\n".encode("utf-8")), encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", fake_stdin)

    assert read_input(None) == [["a"], ["José"]]


def test_write_output_to_file_creates_parent_dirs(tmp_path):
    out_path = tmp_path / "nested" / "dir" / "out.json"

    write_output('{"a":["é"]}', out_path)

    assert out_path.read_text(encoding="utf-8") == '{"a":["é"]}'


def test_write_output_to_stdout(capsys):
    write_output('{"a":[]}')

    assert capsys.readouterr().out == '{"a":[]}'


def test_write_output_unwritable_path(tmp_path):
    """Test that a write failure surfaces as OSError naming the path."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(OSError) as exc_info:
        write_output("{}", blocker / "out.json")

    assert "Failed to write JSON" in str(exc_info.value)
