"""Core functionalities: stateless models and pure functions.

Architecture Note:
    core/ contains plain data records and pure functions with no runtime
    state of their own. For the stateful registry, see storage/ and project/;
    for the composition pass, see composition/.
"""

from g4compose.core.category import Category
from g4compose.core.errors import (
    AlreadyComposedError,
    AlreadyExistsError,
    ConflictingModeError,
    EmptyModuleListError,
    Geant4BuildError,
    InvalidLibraryTypeError,
    InvalidPropertyError,
    LegacyTargetError,
    MissingLayoutError,
    NotFoundError,
    UncomposedModuleError,
    UnparsedArgumentsError,
    UnresolvedModuleError,
)
from g4compose.core.link import (
    deduplicate,
    resolve_link_libraries,
    static_target_name,
    strip_self_reference,
    to_static_references,
)
from g4compose.core.module import (
    Module,
    ModuleProperty,
    UsageRequirements,
    Visibility,
    get_property,
    set_property,
)

__all__ = [
    # Module
    "Module",
    "ModuleProperty",
    "UsageRequirements",
    "Visibility",
    "get_property",
    "set_property",
    # Category
    "Category",
    # Link
    "deduplicate",
    "resolve_link_libraries",
    "static_target_name",
    "strip_self_reference",
    "to_static_references",
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
]
