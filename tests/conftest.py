#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Ensure the local project root (containing the 'bppscan' package) is on sys.path
so tests can import without requiring an installed/editable package.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from PIL import Image

# tests/ -> project_root/
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def make_image():
    """Write a real image with Pillow and return its path."""
    def _make(path: Path, size=(100, 100), fmt: str = "PNG", color=(128, 64, 32)) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGB", size, color).save(path, fmt)
        return path
    return _make
