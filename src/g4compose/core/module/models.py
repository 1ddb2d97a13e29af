"""Module models: visibility tiers, usage requirements and the module record.

Usage:
    module = Module(name="G4globman", directory="/src/global/management")
    module.requirements(Visibility.PUBLIC).link_libraries.append("G4heprandom")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Visibility(Enum):
    """Scope of a usage requirement, mirroring CMake's keyword tiers."""

    PUBLIC = "PUBLIC"  # Used by the module and its consumers
    PRIVATE = "PRIVATE"  # Used by the module only
    INTERFACE = "INTERFACE"  # Used by consumers only


@dataclass
class UsageRequirements:
    """Include directories, compile definitions and links for one visibility tier.

    All three lists are append-only during declaration.
    """

    include_directories: list[str] = field(default_factory=list)
    compile_definitions: list[str] = field(default_factory=list)
    link_libraries: list[str] = field(default_factory=list)


@dataclass
class Module:
    """A named group of headers/sources with usage requirements.

    A module is not a build target. It is composed into exactly one category
    (``parent_target``), and the category is what gets built.

    Attributes:
        name: Unique module name.
        directory: Directory the module was declared in. Holds ``include``
            and, if the module has sources, ``src``.
        public_headers: Absolute paths of public headers, declaration order.
        private_headers: Absolute paths of private headers.
        sources: Absolute paths of source files.
        public: PUBLIC usage requirements.
        private: PRIVATE usage requirements.
        interface: INTERFACE usage requirements.
        parent_target: Owning category, unset until composed.
        list_file: Declaration site (the build script that declared it).
        global_dependencies: Legacy library-level dependency names. Recorded
            only, never resolved.
        source_compile_definitions: Extra definitions for individual sources.
    """

    name: str
    directory: str | None = None
    public_headers: list[str] = field(default_factory=list)
    private_headers: list[str] = field(default_factory=list)
    sources: list[str] = field(default_factory=list)
    public: UsageRequirements = field(default_factory=UsageRequirements)
    private: UsageRequirements = field(default_factory=UsageRequirements)
    interface: UsageRequirements = field(default_factory=UsageRequirements)
    parent_target: str | None = None
    list_file: str | None = None
    global_dependencies: list[str] = field(default_factory=list)
    source_compile_definitions: dict[str, list[str]] = field(default_factory=dict)

    def requirements(self, visibility: Visibility) -> UsageRequirements:
        """Get the usage requirements for a visibility tier."""
        if visibility is Visibility.PUBLIC:
            return self.public
        if visibility is Visibility.PRIVATE:
            return self.private
        return self.interface

    def is_composed(self) -> bool:
        return self.parent_target is not None

    def all_link_libraries(self) -> list[str]:
        """Raw (unresolved) links of all tiers: public, then private, then interface."""
        return [
            *self.public.link_libraries,
            *self.private.link_libraries,
            *self.interface.link_libraries,
        ]
