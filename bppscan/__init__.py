#!/usr/bin/env python3
"""
bppscan package
"""

__all__ = [
    "errors",
    "metrics",
    "output",
    "scanner",
    "cli",
]

__version__ = "0.1.0"
