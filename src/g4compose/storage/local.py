"""Local in-memory storage implementation.

Simple dict-based storage suitable for single-process use and testing.
Dicts preserve insertion order, which is the declaration order that the
adjacency list and the composition pass iterate in.

Usage:
    storage = LocalStorage()
    project = Project(storage=storage)
"""

from __future__ import annotations

import copy as cp
import pickle  # nosec B403 - Snapshots are produced and consumed by the same build
from collections.abc import Iterator

from g4compose.composition.models import CompositionRecord
from g4compose.core.category import Category
from g4compose.core.module import Module


class LocalStorage:
    """In-memory registry storage.

    Structure:
        _modules[name] = Module
        _categories[name] = Category
    """

    def __init__(self) -> None:
        self._modules: dict[str, Module] = {}
        self._categories: dict[str, Category] = {}
        self._buildtree_include_dirs: list[str] = []
        self._composition = CompositionRecord()

    def add_module(self, module: Module) -> None:
        """Insert a module record.

        Args:
            module: Module to store. Stored by reference.

        Raises:
            ValueError: If a module with the same name is already stored.
        """
        if module.name in self._modules:
            raise ValueError(f"Module {module.name} already stored")
        self._modules[module.name] = module

    def get_module(self, name: str, copy: bool = True) -> Module | None:
        """Get a module record.

        Args:
            name: Module name.
            copy: Whether to return a deep copy (default True).

        Returns:
            Module record or None if not defined.
        """
        module = self._modules.get(name)
        if module is None:
            return None
        return cp.deepcopy(module) if copy else module

    def module_exists(self, name: str) -> bool:
        return name in self._modules

    def all_modules(self) -> Iterator[Module]:
        yield from self._modules.values()

    def add_category(self, category: Category) -> None:
        """Insert a category record.

        Raises:
            ValueError: If a category with the same name is already stored.
        """
        if category.name in self._categories:
            raise ValueError(f"Category {category.name} already stored")
        self._categories[category.name] = category

    def get_category(self, name: str, copy: bool = True) -> Category | None:
        category = self._categories.get(name)
        if category is None:
            return None
        return cp.deepcopy(category) if copy else category

    def category_exists(self, name: str) -> bool:
        return name in self._categories

    def all_categories(self) -> Iterator[Category]:
        yield from self._categories.values()

    def append_buildtree_include_directory(self, directory: str) -> None:
        self._buildtree_include_dirs.append(directory)

    def buildtree_include_directories(self) -> list[str]:
        return list(self._buildtree_include_dirs)

    def get_composition(self) -> CompositionRecord:
        return self._composition

    def set_composition(self, record: CompositionRecord) -> None:
        self._composition = record

    def snapshot(self) -> bytes:
        """Pickle entire state for serialization.

        Returns:
            Pickled bytes of storage state.
        """
        return pickle.dumps(
            {
                "modules": self._modules,
                "categories": self._categories,
                "buildtree_include_dirs": self._buildtree_include_dirs,
                "composition": self._composition,
            }
        )

    def restore(self, data: bytes) -> None:
        """Restore from pickle snapshot.

        Args:
            data: Pickled bytes from previous snapshot() call.
        """
        state = pickle.loads(data)  # nosec B301 - Snapshots are produced by this class
        self._modules = state["modules"]
        self._categories = state["categories"]
        self._buildtree_include_dirs = state["buildtree_include_dirs"]
        self._composition = state["composition"]
