"""
objscan CLI entry point.

Usage:
    python -m objscan.cli keys <file>
    python -m objscan.cli entries <file>
    python -m objscan.cli count <file>
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
