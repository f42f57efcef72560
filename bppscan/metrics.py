#!/usr/bin/env python3
"""
Bits-per-pixel metric for a single image file.

bpp = (8 * file_bytes) / (width * height)

This is a container-level density, not the colour depth: it mixes the pixel
payload with headers, metadata chunks and compression efficiency. Only the
image header is read (Pillow opens lazily), never the pixel data.
"""

from __future__ import annotations

import logging
import os
import warnings
from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image

from .errors import MetadataUnavailable

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Pillow raises these for headers it cannot identify or parse.
PROBE_ERRORS = (OSError, SyntaxError, ValueError, Image.DecompressionBombError)


def file_size(path: PathLike) -> int:
    """On-disk byte length of ``path``; raises MetadataUnavailable on failure."""
    try:
        return os.stat(path).st_size
    except OSError as e:
        raise MetadataUnavailable(path) from e


def probe_dimensions(path: PathLike) -> Optional[Tuple[int, int]]:
    """
    Return (width, height) from the image header, or None if the header
    cannot be decoded (corrupt, truncated or unsupported sub-format).
    """
    try:
        with warnings.catch_warnings():
            # Huge dimensions are fine here: nothing gets decompressed.
            warnings.simplefilter("ignore", Image.DecompressionBombWarning)
            with Image.open(path) as im:
                width, height = im.size
    except PROBE_ERRORS as e:
        logger.debug(f"[skip] {path}: undecodable header ({e})")
        return None
    return int(width), int(height)


def bits_per_pixel(size_bytes: int, width: int, height: int) -> Optional[float]:
    """Pure BPP arithmetic; None for a zero-area image."""
    if width == 0 or height == 0:
        return None
    return (float(size_bytes) * 8.0) / (float(width) * float(height))


def calculate_bpp(path: PathLike) -> Optional[float]:
    """
    BPP for one file, or None when no value is meaningful.

    MetadataUnavailable propagates to the caller; a failed header probe or a
    zero dimension yields None.
    """
    size = file_size(path)
    dims = probe_dimensions(path)
    if dims is None:
        return None
    width, height = dims
    bpp = bits_per_pixel(size, width, height)
    if bpp is None:
        logger.debug(f"[skip] {path}: zero dimension ({width}x{height})")
    return bpp
