"""
csv2json – CSV in, JSON out.

Reads comma-separated records, treats the first record as the header row,
and renders the data rows as JSON (column mapping or list of row objects).
"""

__version__ = "0.2.0"
