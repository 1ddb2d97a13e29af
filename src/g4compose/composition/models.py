"""Composition models: state machine, physical targets and install rules.

Types produced by the composition pass and handed to a build backend.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path

from g4compose.core.errors import InvalidLibraryTypeError
from g4compose.core.link import static_target_name
from g4compose.core.module import Visibility


class CompositionState(Enum):
    """Lifecycle of a project's declarations."""

    OPEN = auto()
    """Declarations accepted, targets not yet composed."""

    COMPOSED = auto()
    """Terminal: targets have been composed. No further composition runs."""


@dataclass(frozen=True, slots=True)
class CompositionRecord:
    """Persisted one-shot composition state and where the transition happened."""

    state: CompositionState = CompositionState.OPEN
    origin: str | None = None

    def is_composed(self) -> bool:
        return self.state is CompositionState.COMPOSED

    def composed(self, origin: str | None) -> CompositionRecord:
        """Return the terminal record for a transition made at origin."""
        return CompositionRecord(state=CompositionState.COMPOSED, origin=origin)


class LibraryType(Enum):
    """Physical library variant."""

    SHARED = "SHARED"
    STATIC = "STATIC"

    @classmethod
    def parse(cls, value: str | LibraryType) -> LibraryType:
        """Validate a library type.

        Raises:
            InvalidLibraryTypeError: If value is not SHARED or STATIC.
        """
        if isinstance(value, LibraryType):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidLibraryTypeError(str(value)) from None

    def target_name(self, category: str) -> str:
        """Target name of this variant of a category library."""
        if self is LibraryType.STATIC:
            return static_target_name(category)
        return category


def _tiers() -> dict[Visibility, list[str]]:
    return {visibility: [] for visibility in Visibility}


@dataclass
class PhysicalTarget:
    """Description of one library target for the host build system.

    Attributes:
        name: Target name (``<category>`` or ``<category>-static``).
        category: Category this target is built from.
        library_type: SHARED or STATIC, as a LibraryType or its name.
        alias: Namespaced alias, e.g. ``Geant4::G4global``.
        sources: Headers, sources and declaration scripts, all PRIVATE.
        public_headers: Public headers of the member modules.
        include_directories: Include directories per visibility tier.
        compile_definitions: Compile definitions per visibility tier.
        link_libraries: Resolved link libraries per visibility tier.
        compile_features: PUBLIC compile features.
        properties: Extra target properties (OUTPUT_NAME, AUTOMOC, ...).
        source_groups: IDE source group name to files.
        source_compile_definitions: Per-source extra compile definitions.
    """

    name: str
    category: str
    library_type: LibraryType
    alias: str
    sources: list[str] = field(default_factory=list)
    public_headers: list[str] = field(default_factory=list)
    include_directories: dict[Visibility, list[str]] = field(default_factory=_tiers)
    compile_definitions: dict[Visibility, list[str]] = field(default_factory=_tiers)
    link_libraries: dict[Visibility, list[str]] = field(default_factory=_tiers)
    compile_features: list[str] = field(default_factory=list)
    properties: dict[str, str] = field(default_factory=dict)
    source_groups: dict[str, list[str]] = field(default_factory=dict)
    source_compile_definitions: dict[str, list[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.library_type = LibraryType.parse(self.library_type)

    def all_link_libraries(self) -> list[str]:
        """Links of all tiers, deduplicated and sorted."""
        return sorted({lib for libs in self.link_libraries.values() for lib in libs})


@dataclass
class InstallManifest:
    """Install rules for the composed targets and their public headers."""

    targets: list[str] = field(default_factory=list)
    headers: list[str] = field(default_factory=list)
    export_set: str = "Geant4LibraryDepends"
    library_destination: str = "lib"
    archive_destination: str = "lib"
    runtime_destination: str = "bin"
    header_destination: str = "include"


@dataclass
class CompositionResult:
    """Everything one composition pass produced."""

    targets: list[PhysicalTarget] = field(default_factory=list)
    install: InstallManifest = field(default_factory=InstallManifest)
    adjacency_list: Path | None = None

    def target_names(self) -> list[str]:
        return [target.name for target in self.targets]

    def get_target(self, name: str) -> PhysicalTarget | None:
        for target in self.targets:
            if target.name == name:
                return target
        return None
