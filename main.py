"""
csv2json – Main entry point.

Runs the command-line converter from a source checkout without installing
the package:

    python main.py --pretty < data.csv
"""

import sys
from pathlib import Path

# Ensure src/ is on path for imports
src_root = Path(__file__).parent / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from csv2json.cli import main


if __name__ == "__main__":
    sys.exit(main())
