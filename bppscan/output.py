#!/usr/bin/env python3
"""
Tab-separated report lines: ``<bpp with 2 decimals>\\t<absolute path>``.
"""

from __future__ import annotations

import sys
from typing import IO, Iterable, Optional

from .scanner import Result


def format_result(result: Result) -> str:
    return f"{result.bpp:.2f}\t{result.path}"


def write_results(results: Iterable[Result], stream: Optional[IO[str]] = None, flush: bool = False) -> int:
    """
    Write one line per Result, in the order given. Returns the line count.
    ``flush`` pushes each line out as soon as it is written (streaming mode).
    """
    out = stream if stream is not None else sys.stdout
    count = 0
    for result in results:
        out.write(format_result(result) + "\n")
        if flush:
            out.flush()
        count += 1
    return count
