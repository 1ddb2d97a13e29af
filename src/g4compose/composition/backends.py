"""Build backends: where composed targets are sent.

The composer never creates real build targets. It hands PhysicalTarget
descriptions and an InstallManifest to a backend.

Usage:
    backend = CMakeScriptBackend()
    project = Project(backend=backend)
    ...
    project.compose_targets()
    backend.write(Path("build/Geant4Targets.cmake"))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

from g4compose.composition.models import InstallManifest, PhysicalTarget
from g4compose.core.module import Visibility

logger = logging.getLogger(__name__)


@runtime_checkable
class BuildBackend(Protocol):
    """Protocol for host build systems receiving composed targets."""

    def add_target(self, target: PhysicalTarget) -> None:
        """Create a library target from its description."""
        ...

    def install(self, manifest: InstallManifest) -> None:
        """Add install rules for targets and headers."""
        ...


class RecordingBackend:
    """Default backend: keeps targets and install manifests in memory."""

    def __init__(self) -> None:
        self.targets: dict[str, PhysicalTarget] = {}
        self.manifests: list[InstallManifest] = []

    def add_target(self, target: PhysicalTarget) -> None:
        if target.name in self.targets:
            raise ValueError(f"Target {target.name} already exists")
        self.targets[target.name] = target

    def install(self, manifest: InstallManifest) -> None:
        self.manifests.append(manifest)

    def target_names(self) -> list[str]:
        return list(self.targets)


def _quote(value: str) -> str:
    if not value or any(c in value for c in ' ;"()#'):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return value


def _append_command(
    lines: list[str], command: str, head: Iterable[str], entries: Iterable[str]
) -> None:
    entries = list(entries)
    if not entries:
        return
    lines.append(f"{command}({' '.join(head)}")
    for entry in entries:
        lines.append(f"  {_quote(entry)}")
    lines.append(")")


class CMakeScriptBackend:
    """Backend rendering targets and install rules as CMake commands.

    The rendered script is meant to be included from the project's top
    level CMakeLists.txt after all module scripts are processed.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    def add_target(self, target: PhysicalTarget) -> None:
        name = target.name
        lines = self._lines
        lines.append(f"# - {name}")
        lines.append(f'add_library({name} {target.library_type.value} "")')
        lines.append(f"add_library({target.alias} ALIAS {name})")
        if target.compile_features:
            lines.append(
                f"target_compile_features({name} PUBLIC {' '.join(target.compile_features)})"
            )

        _append_command(lines, "target_sources", [name, "PRIVATE"], target.sources)
        for group, files in target.source_groups.items():
            group_name = group.replace("\\", "\\\\")
            _append_command(lines, "source_group", [group_name, "FILES"], files)

        for visibility in Visibility:
            _append_command(
                lines,
                "target_include_directories",
                [name, visibility.value],
                target.include_directories[visibility],
            )
            _append_command(
                lines,
                "target_compile_definitions",
                [name, visibility.value],
                target.compile_definitions[visibility],
            )
            _append_command(
                lines,
                "target_link_libraries",
                [name, visibility.value],
                target.link_libraries[visibility],
            )

        if target.properties:
            props = " ".join(f"{key} {_quote(value)}" for key, value in target.properties.items())
            lines.append(f"set_target_properties({name} PROPERTIES {props})")

        for source, definitions in target.source_compile_definitions.items():
            lines.append(
                f"set_source_files_properties({_quote(source)} PROPERTIES "
                f'COMPILE_DEFINITIONS "{";".join(definitions)}")'
            )
        lines.append("")
        logger.debug("Rendered %s library target %s", target.library_type.value, name)

    def install(self, manifest: InstallManifest) -> None:
        lines = self._lines
        if manifest.targets:
            lines.append(f"install(TARGETS {' '.join(manifest.targets)}")
            lines.append(f"  EXPORT {manifest.export_set}")
            lines.append(
                f'  ARCHIVE DESTINATION "{manifest.archive_destination}" COMPONENT Development'
            )
            lines.append(
                f'  LIBRARY DESTINATION "{manifest.library_destination}" COMPONENT Runtime'
            )
            lines.append(
                f'  RUNTIME DESTINATION "{manifest.runtime_destination}" COMPONENT Runtime'
            )
            lines.append(f'  INCLUDES DESTINATION "{manifest.header_destination}")')
        if manifest.headers:
            lines.append("install(FILES")
            for header in manifest.headers:
                lines.append(f"  {_quote(header)}")
            lines.append(
                f'  DESTINATION "{manifest.header_destination}" COMPONENT Development)'
            )
        lines.append("")

    def render(self) -> str:
        """Get the CMake script for everything added so far."""
        return "\n".join(self._lines)

    def write(self, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(), encoding="utf-8")
        return path
