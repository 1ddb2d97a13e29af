"""Target composer: turns declared categories into physical library targets.

Usage:
    composer = TargetComposer(settings=ProjectSettings(), backend=RecordingBackend())
    result = composer.compose(modules, categories)

The composer is stateless between calls. The one-shot guard around it lives
on the Project, which persists the composition record in storage.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from g4compose.composition.backends import BuildBackend
from g4compose.composition.models import (
    CompositionResult,
    InstallManifest,
    LibraryType,
    PhysicalTarget,
)
from g4compose.config import ProjectSettings
from g4compose.core.category import Category
from g4compose.core.errors import UncomposedModuleError
from g4compose.core.link import (
    resolve_link_libraries,
    strip_self_reference,
    to_static_references,
)
from g4compose.core.module import Module, Visibility
from g4compose.diagnostics import build_adjacency_records, write_adjacency_list

logger = logging.getLogger(__name__)


def _unique_sorted(values: list[str]) -> list[str]:
    return sorted(set(values))


class TargetComposer:
    """Builds PhysicalTargets for every category and hands them to a backend.

    Usage requirements are promoted from module scope to library scope
    tier by tier: a module's PRIVATE include directories become PRIVATE to
    the whole library, so sibling modules see them. Headers and sources have
    globally unique names across the project, so this can only widen
    visibility, never change which file is found.

    Args:
        settings: Build configuration (variants, exclusions, naming).
        backend: Host build system receiving targets and install rules.
    """

    def __init__(self, settings: ProjectSettings, backend: BuildBackend) -> None:
        self._settings = settings
        self._backend = backend

    def library_types(self) -> list[LibraryType]:
        """Library variants enabled by configuration, shared first."""
        types: list[LibraryType] = []
        if self._settings.build_shared_libs:
            types.append(LibraryType.SHARED)
        if self._settings.build_static_libs:
            types.append(LibraryType.STATIC)
        return types

    def validate(self, modules: Sequence[Module]) -> None:
        """Check every module is composed into a category.

        Raises:
            UncomposedModuleError: For the first module without a category.
        """
        for module in modules:
            if not module.is_composed():
                raise UncomposedModuleError(module.name)

    def compose(
        self,
        modules: Sequence[Module],
        categories: Sequence[Category],
    ) -> CompositionResult:
        """Run the composition pass.

        Args:
            modules: All defined modules in declaration order.
            categories: All defined categories in definition order.

        Returns:
            Targets, install manifest and adjacency list path.

        Raises:
            UncomposedModuleError: If any module has no category. Nothing is
                written or emitted in that case.
        """
        self.validate(modules)

        adjacency_path = write_adjacency_list(
            self._settings.adjacency_list_path, build_adjacency_records(modules)
        )

        by_name = {module.name: module for module in modules}
        parents = {module.name: module.parent_target for module in modules}
        libraries = [category.name for category in categories]

        targets: list[PhysicalTarget] = []
        headers: list[str] = []
        for category in categories:
            if self._settings.is_excluded(category.name):
                logger.debug("Skipping excluded category %s", category.name)
                continue
            for library_type in self.library_types():
                targets.append(
                    self.build_target(category, library_type, by_name, parents, libraries)
                )
            headers.extend(category.public_headers)

        install = InstallManifest(
            targets=[target.name for target in targets],
            headers=headers,
            export_set=self._settings.export_set,
            library_destination=self._settings.install_libdir,
            archive_destination=self._settings.install_libdir,
            runtime_destination=self._settings.install_bindir,
            header_destination=self._settings.header_install_dir,
        )

        # Every target is built before any is emitted
        for target in targets:
            self._backend.add_target(target)
        self._backend.install(install)

        logger.info(
            "Composed %d library targets from %d categories and %d modules",
            len(targets),
            len(categories),
            len(modules),
        )
        return CompositionResult(targets=targets, install=install, adjacency_list=adjacency_path)

    def build_target(
        self,
        category: Category,
        library_type: LibraryType,
        modules: Mapping[str, Module],
        parents: Mapping[str, str | None],
        libraries: Sequence[str],
    ) -> PhysicalTarget:
        """Merge member module requirements into one library target.

        Args:
            category: Category to build.
            library_type: Variant to build.
            modules: All defined modules by name.
            parents: Module name to owning category, for link resolution.
            libraries: All defined category names, for static link rewriting.

        Returns:
            Target with deduplicated usage requirements.
        """
        settings = self._settings
        name = library_type.target_name(category.name)
        target = PhysicalTarget(
            name=name,
            category=category.name,
            library_type=library_type,
            alias=f"{settings.target_namespace}{name}",
            compile_features=list(settings.compile_features),
        )

        if library_type is LibraryType.SHARED:
            # Clients linking the shared library must see the DLL definitions too
            target.compile_definitions[Visibility.PUBLIC].extend(
                settings.shared_compile_definitions
            )
            target.properties["WINDOWS_EXPORT_ALL_SYMBOLS"] = "ON"
            target.properties["MACOSX_RPATH"] = "1"
            if settings.is_macos():
                target.properties["INSTALL_RPATH"] = "@loader_path"
        elif not settings.is_windows():
            target.properties["OUTPUT_NAME"] = category.name

        for module_name in category.modules:
            module = modules[module_name]
            self._add_module_files(target, module)

            for visibility in Visibility:
                requirements = module.requirements(visibility)
                target.include_directories[visibility].extend(requirements.include_directories)
                target.compile_definitions[visibility].extend(requirements.compile_definitions)

                links = resolve_link_libraries(requirements.link_libraries, parents)
                links = strip_self_reference(links, category.name)
                if library_type is LibraryType.STATIC:
                    links = to_static_references(links, libraries)
                target.link_libraries[visibility].extend(links)

            if settings.use_qt and any(
                pattern in module.name for pattern in settings.automoc_modules
            ):
                target.properties["AUTOMOC"] = "ON"

        for tiers in (
            target.include_directories,
            target.compile_definitions,
            target.link_libraries,
        ):
            for visibility, values in tiers.items():
                tiers[visibility] = _unique_sorted(values)

        return target

    def _add_module_files(self, target: PhysicalTarget, module: Module) -> None:
        headers = [*module.public_headers, *module.private_headers]
        target.sources.extend(headers)
        target.sources.extend(module.sources)
        target.public_headers.extend(module.public_headers)

        if headers:
            target.source_groups[f"{module.name}\\Headers"] = headers
        if module.sources:
            target.source_groups[f"{module.name}\\Sources"] = list(module.sources)
        if module.list_file:
            target.sources.append(module.list_file)
            target.source_groups[module.name] = [module.list_file]

        target.source_compile_definitions.update(module.source_compile_definitions)
