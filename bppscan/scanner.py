#!/usr/bin/env python3
"""
Directory scanner: walk a root, keep supported image files, measure BPP.

- Depth 1 (direct children) unless recursive; directory symlinks are not followed.
- Walk order is deterministic: names are sorted at every level.
- Per-file failures are skipped, never raised (logged at DEBUG for -v).
- Without sorting, results stream in discovery order; with sorting, they are
  buffered and ordered by bpp descending, ties kept in discovery order.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from .errors import MetadataUnavailable, PathInvalid
from .metrics import calculate_bpp

logger = logging.getLogger(__name__)

SUPPORTED_EXT = {".png", ".jpg", ".jpeg", ".bmp", ".gif"}


@dataclass(frozen=True)
class Result:
    bpp: float
    path: str  # absolute, or the walked path if it could not be resolved
    seq: int = 0  # discovery index, used as the sort tie-breaker


def validate_root(root: Union[str, Path]) -> Path:
    root = Path(root)
    if not root.exists():
        raise PathInvalid(root, PathInvalid.MISSING)
    if not root.is_dir():
        raise PathInvalid(root, PathInvalid.NOT_A_DIRECTORY)
    return root


def _log_walk_error(e: OSError) -> None:
    logger.debug(f"[skip] {e.filename}: {e.strerror or e}")


def iter_files(root: Path, recursive: bool = False) -> Iterator[Path]:
    """Yield non-directory entries under root (the root itself is never yielded)."""
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        if recursive:
            dirnames.sort()
        else:
            dirnames.clear()
        base = Path(dirpath)
        for name in sorted(filenames):
            yield base / name


def is_candidate(path: Path) -> bool:
    return path.suffix.lower() in SUPPORTED_EXT


def canonical_path(path: Path) -> str:
    try:
        return str(path.resolve(strict=True))
    except (OSError, RuntimeError) as e:
        logger.debug(f"[fallback] {path}: cannot canonicalize ({e})")
        return str(path)


def measure(path: Path, seq: int = 0, threshold: Optional[float] = None) -> Optional[Result]:
    """Measure one candidate; None when it is skipped or filtered out."""
    try:
        bpp = calculate_bpp(path)
    except MetadataUnavailable as e:
        logger.debug(f"[skip] {path}: {e.__cause__ or e}")
        return None
    if bpp is None:
        return None
    if threshold is not None and bpp <= threshold:
        return None
    return Result(bpp=bpp, path=canonical_path(path), seq=seq)


def _iter_results(root: Path, recursive: bool, threshold: Optional[float]) -> Iterator[Result]:
    seq = 0
    for path in iter_files(root, recursive):
        if not path.is_file() or not is_candidate(path):
            continue
        result = measure(path, seq, threshold)
        seq += 1
        if result is not None:
            yield result


def sort_results(results: Iterable[Result]) -> List[Result]:
    """bpp descending; equal bpp keeps discovery order."""
    return sorted(results, key=lambda r: (-r.bpp, r.seq))


def scan(root: Union[str, Path],
         recursive: bool = False,
         threshold: Optional[float] = None,
         sort: bool = False) -> Iterator[Result]:
    """
    Validate ``root`` (raising PathInvalid immediately) and return an iterator
    of Results: streamed in discovery order, or buffered and sorted.
    """
    root = validate_root(root)
    logger.debug(f"scan start: root={root} recursive={recursive} threshold={threshold} sort={sort}")
    results = _iter_results(root, recursive, threshold)
    if sort:
        return iter(sort_results(results))
    return results
