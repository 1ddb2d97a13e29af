"""Target composition: the one-shot pass from categories to library targets."""

from g4compose.composition.backends import BuildBackend, CMakeScriptBackend, RecordingBackend
from g4compose.composition.composer import TargetComposer
from g4compose.composition.models import (
    CompositionRecord,
    CompositionResult,
    CompositionState,
    InstallManifest,
    LibraryType,
    PhysicalTarget,
)

__all__ = [
    # Composer
    "TargetComposer",
    # Models
    "CompositionRecord",
    "CompositionResult",
    "CompositionState",
    "InstallManifest",
    "LibraryType",
    "PhysicalTarget",
    # Backends
    "BuildBackend",
    "CMakeScriptBackend",
    "RecordingBackend",
]
