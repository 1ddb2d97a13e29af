"""Storage backends."""

from g4compose.storage.local import LocalStorage
from g4compose.storage.protocol import Storage

__all__ = [
    "Storage",
    "LocalStorage",
]
