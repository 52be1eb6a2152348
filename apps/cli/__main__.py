"""Module entry point for python -m apps.cli."""

import sys

from apps.cli.main import main

if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
