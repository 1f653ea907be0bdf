"""Console entry point

Usage:
    python -m src.todo [options]
"""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
