"""Filesystem probe used to check module directory layout.

Only existence is ever asked; file contents are never read.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class Filesystem(Protocol):
    """Protocol for the directory-existence check made when adding modules."""

    def exists(self, path: str) -> bool:
        """Check whether path exists."""
        ...


class LocalFilesystem:
    """Filesystem probe backed by the real filesystem."""

    def exists(self, path: str) -> bool:
        return Path(path).exists()
