"""
CSV decoding, transposition, JSON rendering, and stream I/O.

Everything between "bytes came in on stdin" and "JSON text went out on
stdout" lives here; the CLI only wires options and exit codes around it.
"""
