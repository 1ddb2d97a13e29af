"""Backward compatibility facade for the older module/library declarations.

These functions implement the old declaration shapes in terms of the
module/category API, allowing migration with a controlled transition.
With ``warn_deprecated`` enabled in settings they issue DeprecationWarning
naming the replacement.

Usage:
    before = project.get_modules()
    define_module(project, name="G4globman", directory=path,
                  headers=["G4Types.hh"], sources=["G4Types.cc"],
                  granular_dependencies=["G4heprandom"])
    global_library_target(project, before=before, name="G4global")
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Sequence
from pathlib import Path

from g4compose.composition.models import InstallManifest, LibraryType, PhysicalTarget
from g4compose.core.errors import EmptyModuleListError, LegacyTargetError, NotFoundError
from g4compose.core.link import to_static_references
from g4compose.core.module import ModuleProperty, Visibility
from g4compose.project import Project

logger = logging.getLogger(__name__)


def _deprecated(project: Project, old: str, replacement: str) -> None:
    if project.settings.warn_deprecated:
        warnings.warn(
            f"Use of {old} is deprecated, please use {replacement} instead",
            DeprecationWarning,
            stacklevel=3,
        )


def define_module(
    project: Project,
    *,
    name: str,
    directory: str | Path,
    headers: Sequence[str] = (),
    sources: Sequence[str] = (),
    granular_dependencies: Sequence[str] = (),
    global_dependencies: Sequence[str] = (),
    link_libraries: Sequence[str] = (),
    origin: str | None = None,
) -> None:
    """Declare a module with the old flat argument set.

    HEADERS become public headers. GRANULAR_DEPENDENCIES and LINK_LIBRARIES
    both become PUBLIC links. GLOBAL_DEPENDENCIES are only recorded, as the
    transitional GLOBAL_DEPENDENCIES property.
    """
    _deprecated(project, "define_module", "Project.add_module and module_link_libraries")
    project.add_module(
        name,
        directory=directory,
        public_headers=headers,
        sources=sources,
        origin=origin,
    )
    project.module_link_libraries(name, public=[*granular_dependencies, *link_libraries])
    project.set_module_property(name, ModuleProperty.GLOBAL_DEPENDENCIES, *global_dependencies)


def global_library_target(
    project: Project,
    *,
    before: Sequence[str],
    name: str | None = None,
    compile_definitions: Sequence[str] = (),
    origin: str | None = None,
) -> str:
    """Compose every module declared since ``before`` into one category.

    Args:
        project: Project to declare into.
        before: Module names defined before the library's modules were
            declared, typically ``project.get_modules()`` taken earlier.
        name: Category name. Defaults to the first newly declared module.
        compile_definitions: Directory-level definitions at the call site,
            added PRIVATE to each new module.
        origin: Declaration site.

    Returns:
        The category name used.

    Raises:
        EmptyModuleListError: If no module was declared since ``before``.
    """
    _deprecated(project, "global_library_target", "Project.add_category")
    previous = set(before)
    new_modules = [module for module in project.get_modules() if module not in previous]
    if not new_modules:
        raise EmptyModuleListError(name)

    category = name or new_modules[0]
    if compile_definitions:
        for module in new_modules:
            project.module_compile_definitions(module, private=compile_definitions)

    project.add_category(category, new_modules, origin=origin)
    return category


def library_target(
    project: Project,
    *,
    name: str,
    directory: str | Path,
    sources: Sequence[str] = (),
    geant4_link_libraries: Sequence[str] = (),
    link_libraries: Sequence[str] = (),
    origin: str | None = None,
) -> list[PhysicalTarget]:
    """Build a bootstrap library directly, outside composition.

    Only for the bundled third-party libraries (CLHEP, Expat, ...) whose
    upstream layout is reused. The name must be on the settings'
    ``excluded_categories`` list, so composition does not build it again.
    Targets are sent to the backend immediately and the library is
    registered as a category for static link rewriting.

    Returns:
        The targets created, shared first.

    Raises:
        LegacyTargetError: If name is not an excluded category.
    """
    settings = project.settings
    base = Path(directory)
    if not settings.is_excluded(name):
        raise LegacyTargetError(name, base.as_posix())

    source_paths = [
        src if Path(src).is_absolute() else (base / src).as_posix() for src in sources
    ]
    project.register_legacy_category(name, origin=origin)
    libraries = project.get_categories()
    library_types: list[LibraryType] = []
    if settings.build_shared_libs:
        library_types.append(LibraryType.SHARED)
    if settings.build_static_libs:
        library_types.append(LibraryType.STATIC)

    targets: list[PhysicalTarget] = []
    for library_type in library_types:
        target_name = library_type.target_name(name)
        target = PhysicalTarget(
            name=target_name,
            category=name,
            library_type=library_type,
            alias=f"{settings.target_namespace}{target_name}",
            sources=list(source_paths),
            compile_features=list(settings.compile_features),
        )
        target.include_directories[Visibility.PUBLIC].append(
            f"$<BUILD_INTERFACE:{(base / 'include').as_posix()}>"
        )

        geant4_links = list(geant4_link_libraries)
        if library_type is LibraryType.SHARED:
            target.compile_definitions[Visibility.PUBLIC].extend(
                settings.shared_compile_definitions
            )
            target.properties["WINDOWS_EXPORT_ALL_SYMBOLS"] = "ON"
        else:
            geant4_links = to_static_references(geant4_links, libraries)
            if not settings.is_windows():
                target.properties["OUTPUT_NAME"] = name
        target.link_libraries[Visibility.PUBLIC].extend([*geant4_links, *link_libraries])

        project.backend.add_target(target)
        project.backend.install(
            InstallManifest(
                targets=[target_name],
                export_set=settings.export_set,
                library_destination=settings.install_libdir,
                archive_destination=settings.install_libdir,
                runtime_destination=settings.install_bindir,
                header_destination=settings.header_install_dir,
            )
        )
        targets.append(target)

    logger.debug("Built bootstrap library %s outside composition", name)
    return targets


def add_compile_definitions(
    project: Project,
    *,
    directory: str | Path,
    sources: Sequence[str],
    compile_definitions: Sequence[str],
) -> None:
    """Add compile definitions to specific sources of the module in directory.

    Sources are relative to the ``src`` subdirectory of ``directory``. The
    definitions are attached to the module declaring that source, or to the
    last module declared in the directory.

    Raises:
        NotFoundError: If no module is declared in directory.
    """
    candidates = project.modules_in_directory(directory)
    if not candidates:
        raise NotFoundError("module directory", Path(directory).as_posix())

    source_dir = Path(directory) / "src"
    for source in sources:
        path = source if Path(source).is_absolute() else (source_dir / source).as_posix()
        owner = next(
            (name for name in candidates if path in project.get_module(name).sources),
            candidates[-1],
        )
        project.add_source_compile_definitions(owner, [path], compile_definitions)
