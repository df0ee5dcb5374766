"""
Entry point for the appa application.

This module serves as the main entry point when running the package as a module:
    python -m appa
"""

import sys
from appa.cli import main

if __name__ == "__main__":
    sys.exit(main())
