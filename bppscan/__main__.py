#!/usr/bin/env python3
"""
Command-line entry point for ``python -m bppscan``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
