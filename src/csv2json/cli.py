"""
Command-line entry point: CSV on stdin (or --in), JSON on stdout (or --out).

**Usage**:
    # Column mapping, compact
    printf 'a,b\\n1,2\\n3,4\\n' | csv2json
    {"a":["1","3"],"b":["2","4"]}

    # Pretty-printed
    csv2json --pretty < data.csv

    # One object per row, from a file into a file
    csv2json -f lom -i data.csv -o data.json

    # Tolerate wide rows and duplicate header names (warnings on stderr)
    csv2json --allow-anomalies < messy.csv

**Exit codes**:
  - 0: Success
  - 1: Bad input or configuration (malformed CSV, unknown format, bad setting)
  - 2: I/O failure (missing input file, unwritable output)
  - 130: Interrupted
"""

import argparse
import sys
from typing import Sequence

from csv2json import __version__
from csv2json.config.settings import get_settings
from csv2json.data.io import convert_records, read_input, write_output
from csv2json.data.schemas import OutputFormat, ParseError


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="csv2json",
        description="CSV in; JSON out. The first CSV row supplies the JSON keys.",
        epilog="""
Formats:
  map-of-lists (mol, m)   {"a": ["1", "3"], "b": ["2", "4"]}   (default)
  list-of-maps (lom, l)   [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]

Defaults can be set in the environment or a .env file:
  CSV2JSON_DEFAULT_FORMAT, CSV2JSON_INDENT, CSV2JSON_ENCODING
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-p", "--pretty",
        action="store_true",
        help="Pretty JSON output (indented, one item per line)",
    )
    parser.add_argument(
        "-f", "--format",
        default=None,
        help="JSON format: map-of-lists or list-of-maps (default: CSV2JSON_DEFAULT_FORMAT or map-of-lists)",
    )
    parser.add_argument(
        "-i", "--in",
        dest="input_file",
        default=None,
        help="Input CSV file; omit to read STDIN",
    )
    parser.add_argument(
        "-o", "--out",
        dest="output_file",
        default=None,
        help="Output JSON file; omit to write STDOUT",
    )
    parser.add_argument(
        "-a", "--allow-anomalies",
        action="store_true",
        help="Warn instead of failing on rows wider than the header and duplicate header names",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Input text encoding (default: CSV2JSON_ENCODING or utf-8)",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run one conversion and return the process exit code.

    Library code raises; this is the only place that turns exceptions into
    messages on stderr and exit codes. Nothing is written to the output
    unless the conversion succeeds.
    """
    args = parse_args(argv)

    try:
        try:
            settings = get_settings()
            output_format = (
                OutputFormat.from_name(args.format)
                if args.format is not None
                else settings.default_format
            )
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        encoding = args.encoding or settings.encoding

        try:
            records = read_input(args.input_file, encoding=encoding)
            text = convert_records(
                records,
                output_format=output_format,
                pretty=args.pretty,
                allow_anomalies=args.allow_anomalies,
                indent=settings.indent,
            )
        except (ParseError, LookupError) as e:
            # LookupError: unknown codec name
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

        try:
            write_output(text, args.output_file)
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user. Exiting...", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
