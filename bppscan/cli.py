#!/usr/bin/env python3
"""
bppscan CLI: report the bits-per-pixel ratio of images under a directory.

Output is one ``<bpp>\\t<path>`` line per image on stdout. Diagnostics go
to stderr through logging and stay quiet unless -v is given.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .errors import PathInvalid
from .output import write_results
from .scanner import scan

logger = logging.getLogger(__name__)


# --------------------------- logging ---------------------------------
def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%H:%M:%S",
    )

    # Keep Pillow's plugin chatter out of -v output
    for name in ("PIL", "PIL.Image", "PIL.PngImagePlugin", "PIL.TiffImagePlugin"):
        logging.getLogger(name).setLevel(logging.WARNING)


# --------------------------- streams --------------------------------
def _setup_streams() -> None:
    # Undecodable file names arrive as lone surrogates; write their raw bytes back out.
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(errors="surrogateescape")


# --------------------------- parser ----------------------------------
def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bppscan",
        description="Calculates Bits Per Pixel (BPP) for images",
    )
    ap.add_argument("target_dir", nargs="?", type=Path, default=Path("."),
                    help="Target directory (default: current directory)")
    ap.add_argument("-r", "--recursive", action="store_true", help="Recursive search")
    ap.add_argument("-t", "--threshold", type=float,
                    help="BPP threshold (only show files with BPP > threshold)")
    ap.add_argument("-s", "--sort", action="store_true", help="Sort by BPP descending")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="Log skipped files and other diagnostics to stderr")
    ap.add_argument("-V", "--version", action="version", version=f"bppscan {__version__}")
    return ap


# --------------------------- run -------------------------------------
def run(args: argparse.Namespace) -> int:
    try:
        results = scan(args.target_dir, recursive=args.recursive,
                       threshold=args.threshold, sort=args.sort)
    except PathInvalid as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    count = write_results(results, flush=not args.sort)
    logger.debug(f"scan done: {count} image(s) reported")
    return 0


# --------------------------- entrypoint ------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(argv)
    _setup_streams()
    _setup_logging(args.verbose)
    try:
        return run(args)
    except KeyboardInterrupt:
        return 130
    except BrokenPipeError:
        # Reader went away (e.g. `| head`); silence the final flush at exit.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
