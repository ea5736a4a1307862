"""Module entry point for running with python -m jiradoc."""

import sys

from jiradoc.cli import main

if __name__ == "__main__":
    sys.exit(main())
