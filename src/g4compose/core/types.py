"""Core type definitions for g4compose."""

from typing import TypeAlias

ModuleName: TypeAlias = str
"""Unique name of a module, e.g. ``G4globman``."""

CategoryName: TypeAlias = str
"""Unique name of a category, i.e. a physical library such as ``G4global``."""

LinkReference: TypeAlias = str
"""A link token: a module name, a category name, or an opaque external target."""

STATIC_SUFFIX = "-static"
