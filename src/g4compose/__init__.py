"""g4compose: Module/category dependency resolution and library target composition.

Usage:
    from g4compose import Project, ProjectSettings

    project = Project(ProjectSettings(build_static_libs=True))
    project.add_module("G4globman", directory="source/global/management",
                       public_headers=["G4Types.hh"], sources=["G4Types.cc"])
    project.add_module("G4heprandom", directory="source/global/HEPRandom",
                       sources=["Random.cc"])
    project.module_link_libraries("G4heprandom", public=["G4globman"])
    project.add_category("G4global", ["G4globman", "G4heprandom"])
    result = project.compose_targets()
"""

__version__ = "0.1.0"

# Configuration
from g4compose.config import ProjectSettings

# Core primitives
from g4compose.core import (
    AlreadyComposedError,
    AlreadyExistsError,
    Category,
    ConflictingModeError,
    EmptyModuleListError,
    Geant4BuildError,
    InvalidLibraryTypeError,
    InvalidPropertyError,
    LegacyTargetError,
    MissingLayoutError,
    Module,
    ModuleProperty,
    NotFoundError,
    UncomposedModuleError,
    UnparsedArgumentsError,
    UnresolvedModuleError,
    Visibility,
    resolve_link_libraries,
)

# Composition
from g4compose.composition import (
    BuildBackend,
    CMakeScriptBackend,
    CompositionResult,
    CompositionState,
    InstallManifest,
    LibraryType,
    PhysicalTarget,
    RecordingBackend,
    TargetComposer,
)

# Diagnostics
from g4compose.diagnostics import AdjacencyRecord, parse_adjacency_list

# Storage
from g4compose.storage import (
    LocalStorage,
    Storage,
)

# Project
from g4compose.project import (
    Filesystem,
    LocalFilesystem,
    Project,
)

__all__ = [
    # Version
    "__version__",
    # Configuration
    "ProjectSettings",
    # Core
    "Category",
    "Module",
    "ModuleProperty",
    "Visibility",
    "resolve_link_libraries",
    # Errors
    "Geant4BuildError",
    "AlreadyComposedError",
    "AlreadyExistsError",
    "ConflictingModeError",
    "EmptyModuleListError",
    "InvalidLibraryTypeError",
    "InvalidPropertyError",
    "LegacyTargetError",
    "MissingLayoutError",
    "NotFoundError",
    "UncomposedModuleError",
    "UnparsedArgumentsError",
    "UnresolvedModuleError",
    # Composition
    "BuildBackend",
    "CMakeScriptBackend",
    "CompositionResult",
    "CompositionState",
    "InstallManifest",
    "LibraryType",
    "PhysicalTarget",
    "RecordingBackend",
    "TargetComposer",
    # Diagnostics
    "AdjacencyRecord",
    "parse_adjacency_list",
    # Storage
    "Storage",
    "LocalStorage",
    # Project
    "Project",
    "Filesystem",
    "LocalFilesystem",
]
