"""
Entry point for running SugarScan as a module.

Usage:
    python -m sugarscan TARGET --target ID [options]
"""

import sys

from sugarscan.cli import main

if __name__ == "__main__":
    sys.exit(main())
