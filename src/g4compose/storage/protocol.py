"""Storage protocol for swappable registry backends.

The storage layer holds every piece of declaration state: modules,
categories, the build-tree include directory list and the composition
record. A Project over restored storage sees the restored composition
record, so it still refuses to compose twice.

Usage:
    storage = LocalStorage()
    project = Project(storage=storage)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from g4compose.composition.models import CompositionRecord
from g4compose.core.category import Category
from g4compose.core.module import Module


class Storage(Protocol):
    """Abstract registry storage interface."""

    def add_module(self, module: Module) -> None:
        """Insert a new module record."""
        ...

    def get_module(self, name: str, copy: bool = True) -> Module | None:
        """Get module record by name."""
        ...

    def module_exists(self, name: str) -> bool:
        """Check if module is defined."""
        ...

    def all_modules(self) -> Iterator[Module]:
        """Iterate module records in declaration order (no copies)."""
        ...

    def add_category(self, category: Category) -> None:
        """Insert a new category record."""
        ...

    def get_category(self, name: str, copy: bool = True) -> Category | None:
        """Get category record by name."""
        ...

    def category_exists(self, name: str) -> bool:
        """Check if category is defined."""
        ...

    def all_categories(self) -> Iterator[Category]:
        """Iterate category records in definition order (no copies)."""
        ...

    def append_buildtree_include_directory(self, directory: str) -> None:
        """Record a module include directory in the project-wide list."""
        ...

    def buildtree_include_directories(self) -> list[str]:
        """Get the project-wide build-tree include directory list."""
        ...

    def get_composition(self) -> CompositionRecord:
        """Get the composition state record."""
        ...

    def set_composition(self, record: CompositionRecord) -> None:
        """Persist the composition state record."""
        ...

    def snapshot(self) -> bytes:
        """Serialize entire storage state."""
        ...

    def restore(self, data: bytes) -> None:
        """Restore from snapshot."""
        ...
