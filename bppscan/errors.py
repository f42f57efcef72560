#!/usr/bin/env python3
"""
Exceptions raised by the scanner and the metric calculator.

Only PathInvalid is fatal; MetadataUnavailable is raised per file and the
scanner decides to skip it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union


class BppScanError(Exception):
    """Base class for bppscan errors."""


class PathInvalid(BppScanError):
    """The scan root is missing or is not a directory."""

    MISSING = "missing"
    NOT_A_DIRECTORY = "not_a_directory"

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        if reason == self.MISSING:
            message = f"Directory '{self.path}' does not exist."
        else:
            message = f"'{self.path}' is not a directory."
        super().__init__(message)


class MetadataUnavailable(BppScanError):
    """File-system metadata (size) could not be read for a file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Failed to get file metadata: {self.path}")
