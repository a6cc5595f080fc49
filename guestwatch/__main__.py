"""Entry point for `python -m guestwatch`."""

import sys

from guestwatch.cli import main

if __name__ == "__main__":
    sys.exit(main())
