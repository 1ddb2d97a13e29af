"""Project: the context object owning every module and category declaration.

Usage:
    project = Project()

    # Declare modules
    project.add_module("G4globman", directory="/src/global/management",
                       public_headers=["G4Types.hh"], sources=["G4Types.cc"])
    project.module_link_libraries("G4globman", public=["G4heprandom"])

    # Group modules into categories (physical libraries)
    project.add_category("G4global", ["G4globman", "G4heprandom"])

    # Create the library targets, exactly once
    result = project.compose_targets()
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from g4compose.composition.backends import BuildBackend, RecordingBackend
from g4compose.composition.composer import TargetComposer
from g4compose.composition.models import CompositionRecord, CompositionResult, CompositionState
from g4compose.config import ProjectSettings
from g4compose.core.category import Category
from g4compose.core.errors import (
    AlreadyComposedError,
    AlreadyExistsError,
    EmptyModuleListError,
    MissingLayoutError,
    NotFoundError,
)
from g4compose.core.link import resolve_link_libraries
from g4compose.core.module import (
    Module,
    ModuleProperty,
    Visibility,
    get_property,
    set_property,
)
from g4compose.project.filesystem import Filesystem, LocalFilesystem
from g4compose.storage.local import LocalStorage
from g4compose.storage.protocol import Storage

logger = logging.getLogger(__name__)


def _resolve_paths(paths: Iterable[str], base: Path) -> list[str]:
    """Resolve relative paths against base, leave absolute paths unchanged."""
    resolved: list[str] = []
    for path in paths:
        if Path(path).is_absolute():
            resolved.append(path)
        else:
            resolved.append((base / path).as_posix())
    return resolved


class Project:
    """Module/category registry and composition state for one build.

    Owns a storage backend (the registry), a build backend (receives the
    composed targets) and a filesystem probe. Declarations go through the
    Project; composition runs once through compose_targets().

    Args:
        settings: Build configuration. Defaults to ProjectSettings() read
            from the environment.
        storage: Registry storage. Defaults to LocalStorage().
        backend: Host build backend. Defaults to RecordingBackend().
        filesystem: Directory probe. Defaults to LocalFilesystem().
    """

    def __init__(
        self,
        settings: ProjectSettings | None = None,
        storage: Storage | None = None,
        backend: BuildBackend | None = None,
        filesystem: Filesystem | None = None,
    ):
        self._settings = settings or ProjectSettings()
        self._storage = storage or LocalStorage()
        self._backend = backend or RecordingBackend()
        self._filesystem = filesystem or LocalFilesystem()
        self._composer = TargetComposer(settings=self._settings, backend=self._backend)

    @property
    def settings(self) -> ProjectSettings:
        return self._settings

    @property
    def backend(self) -> BuildBackend:
        return self._backend

    # Modules

    def add_module(
        self,
        name: str,
        *,
        directory: str | Path,
        public_headers: Sequence[str] = (),
        sources: Sequence[str] = (),
        origin: str | None = None,
    ) -> None:
        """Declare a module.

        The module directory must contain an ``include`` subdirectory, and a
        ``src`` subdirectory if sources are given. Relative header and source
        paths are interpreted relative to these; absolute paths (e.g. of
        generated files) are used as is.

        Args:
            name: Unique module name.
            directory: Directory the module is declared in.
            public_headers: Headers making up the public interface.
            sources: Source files.
            origin: Declaration site, reported if the name is reused.

        Raises:
            AlreadyExistsError: If a module of that name exists.
            MissingLayoutError: If the include or src subdirectory is missing.
        """
        existing = self._storage.get_module(name, copy=False)
        if existing is not None:
            raise AlreadyExistsError("module", name, existing.list_file)

        module_dir = Path(directory)
        include_dir = module_dir / "include"
        source_dir = module_dir / "src"
        if not self._filesystem.exists(include_dir.as_posix()):
            raise MissingLayoutError(name, "include", module_dir.as_posix())
        if sources and not self._filesystem.exists(source_dir.as_posix()):
            raise MissingLayoutError(name, "src", module_dir.as_posix())

        self._warn_if_composed("module", name)
        module = Module(
            name=name,
            directory=module_dir.as_posix(),
            public_headers=_resolve_paths(public_headers, include_dir),
            sources=_resolve_paths(sources, source_dir),
            list_file=origin,
        )
        # Installed consumers get the INCLUDES destination instead
        module.public.include_directories.append(f"$<BUILD_INTERFACE:{include_dir.as_posix()}>")
        self._storage.add_module(module)
        # Compatibility list for consumers that ignore usage requirements
        self._storage.append_buildtree_include_directory(include_dir.as_posix())
        logger.debug("Added module %s from %s", name, module.directory)

    def _require_module(self, name: str) -> Module:
        module = self._storage.get_module(name, copy=False)
        if module is None:
            raise NotFoundError("module", name)
        return module

    def _extend_requirements(
        self,
        module_name: str,
        attribute: str,
        public: Sequence[str],
        private: Sequence[str],
        interface: Sequence[str],
    ) -> None:
        module = self._require_module(module_name)
        for visibility, values in (
            (Visibility.PUBLIC, public),
            (Visibility.PRIVATE, private),
            (Visibility.INTERFACE, interface),
        ):
            getattr(module.requirements(visibility), attribute).extend(values)

    def module_include_directories(
        self,
        module: str,
        *,
        public: Sequence[str] = (),
        private: Sequence[str] = (),
        interface: Sequence[str] = (),
    ) -> None:
        """Add include directories to a module.

        Raises:
            NotFoundError: If the module is not defined.
        """
        self._extend_requirements(module, "include_directories", public, private, interface)

    def module_link_libraries(
        self,
        module: str,
        *,
        public: Sequence[str] = (),
        private: Sequence[str] = (),
        interface: Sequence[str] = (),
    ) -> None:
        """Link a module to other modules, categories or external targets.

        Raises:
            NotFoundError: If the module is not defined.
        """
        self._extend_requirements(module, "link_libraries", public, private, interface)

    def module_compile_definitions(
        self,
        module: str,
        *,
        public: Sequence[str] = (),
        private: Sequence[str] = (),
        interface: Sequence[str] = (),
    ) -> None:
        """Add compile definitions to a module.

        Raises:
            NotFoundError: If the module is not defined.
        """
        self._extend_requirements(module, "compile_definitions", public, private, interface)

    def add_source_compile_definitions(
        self, module: str, sources: Sequence[str], definitions: Sequence[str]
    ) -> None:
        """Add compile definitions to individual sources of a module.

        Relative source paths are interpreted relative to the module's
        ``src`` subdirectory.

        Raises:
            NotFoundError: If the module is not defined.
        """
        record = self._require_module(module)
        source_dir = Path(record.directory or ".") / "src"
        for source in _resolve_paths(sources, source_dir):
            record.source_compile_definitions.setdefault(source, []).extend(definitions)

    def get_modules(self) -> tuple[str, ...]:
        """Names of all defined modules, in declaration order."""
        return tuple(module.name for module in self._storage.all_modules())

    def has_module(self, name: str) -> bool:
        return self._storage.module_exists(name)

    def modules_in_directory(self, directory: str | Path) -> tuple[str, ...]:
        """Names of modules declared in a directory, in declaration order."""
        wanted = Path(directory).as_posix()
        return tuple(
            module.name for module in self._storage.all_modules() if module.directory == wanted
        )

    def get_module(self, name: str) -> Module:
        """Get a copy of a module record.

        Raises:
            NotFoundError: If the module is not defined.
        """
        module = self._storage.get_module(name, copy=True)
        if module is None:
            raise NotFoundError("module", name)
        return module

    def get_module_property(
        self, module: str, name: str | ModuleProperty
    ) -> list[str] | str | None:
        """Get a module property by its whitelisted name.

        Raises:
            NotFoundError: If the module is not defined.
            InvalidPropertyError: If name is not a module property.
        """
        return get_property(self._require_module(module), name)

    def set_module_property(
        self,
        module: str,
        name: str | ModuleProperty,
        *values: str,
        append: bool = False,
        append_string: bool = False,
    ) -> None:
        """Set a module property by its whitelisted name.

        Raises:
            NotFoundError: If the module is not defined.
            InvalidPropertyError: If name is not a module property.
            ConflictingModeError: If both append modes are requested.
            AlreadyComposedError: If PARENT_TARGET is already set.
        """
        set_property(
            self._require_module(module),
            name,
            values,
            append=append,
            append_string=append_string,
        )

    def buildtree_include_directories(self) -> list[str]:
        """Include directories of all modules, for consumers without usage requirements."""
        return self._storage.buildtree_include_directories()

    # Categories

    def add_category(
        self, name: str, modules: Sequence[str], *, origin: str | None = None
    ) -> None:
        """Declare a category composed of modules.

        No library target is created here. Modules link to modules, so
        targets can only be created once every module's category is known;
        see compose_targets().

        All modules are checked before any is composed, so a failing call
        leaves the registry unchanged.

        Args:
            name: Unique category name.
            modules: Modules to compose into the category, at least one.
            origin: Declaration site.

        Raises:
            EmptyModuleListError: If modules is empty.
            AlreadyExistsError: If a category of that name exists.
            NotFoundError: If a module is not defined.
            AlreadyComposedError: If a module already belongs to a category.
        """
        if not modules:
            raise EmptyModuleListError(name)
        existing = self._storage.get_category(name, copy=False)
        if existing is not None:
            raise AlreadyExistsError("category", name, existing.list_file)

        members: list[Module] = []
        for module_name in modules:
            module = self._require_module(module_name)
            if module.parent_target is not None:
                raise AlreadyComposedError.for_module(module_name, module.parent_target, name)
            if any(member.name == module_name for member in members):
                raise AlreadyComposedError.for_module(module_name, name, name)
            members.append(module)

        self._warn_if_composed("category", name)
        category = Category(name=name, list_file=origin)
        for module in members:
            module.parent_target = name
            category.modules.append(module.name)
            category.public_headers.extend(module.public_headers)
        self._storage.add_category(category)
        logger.debug("Added category %s with modules %s", name, ", ".join(category.modules))

    def register_legacy_category(self, name: str, *, origin: str | None = None) -> None:
        """Record a library built outside composition as a defined category.

        Such libraries have no modules, but must be known as libraries so
        static targets linking to them use their static variant.

        Raises:
            AlreadyExistsError: If a category of that name exists.
        """
        existing = self._storage.get_category(name, copy=False)
        if existing is not None:
            raise AlreadyExistsError("category", name, existing.list_file)
        self._storage.add_category(Category(name=name, list_file=origin, legacy=True))

    def get_categories(self) -> tuple[str, ...]:
        """Names of all defined categories, in definition order."""
        return tuple(category.name for category in self._storage.all_categories())

    def has_category(self, name: str) -> bool:
        return self._storage.category_exists(name)

    def get_category(self, name: str) -> Category:
        """Get a copy of a category record.

        Raises:
            NotFoundError: If the category is not defined.
        """
        category = self._storage.get_category(name, copy=True)
        if category is None:
            raise NotFoundError("category", name)
        return category

    # Links

    def resolve_link_libraries(self, references: Iterable[str]) -> list[str]:
        """Resolve module references to their categories, removing duplicates.

        Raises:
            UnresolvedModuleError: If a referenced module has no category yet.
        """
        parents = {module.name: module.parent_target for module in self._storage.all_modules()}
        return resolve_link_libraries(references, parents)

    # Composition

    @property
    def composition(self) -> CompositionRecord:
        return self._storage.get_composition()

    @property
    def state(self) -> CompositionState:
        return self.composition.state

    def compose_targets(self, *, origin: str | None = None) -> CompositionResult:
        """Create the physical library targets for all categories.

        Must be called once, after every module and category is declared.

        Args:
            origin: Call site, reported if composition is attempted again.

        Returns:
            The composed targets, install manifest and adjacency list path.

        Raises:
            AlreadyComposedError: If targets were already composed, naming
                where that happened.
            UncomposedModuleError: If any module is not in a category. No
                target is created for any category in that case.
        """
        record = self._storage.get_composition()
        if record.is_composed():
            raise AlreadyComposedError.for_targets(record.origin)

        result = self._composer.compose(
            list(self._storage.all_modules()),
            list(self._storage.all_categories()),
        )
        self._storage.set_composition(record.composed(origin))
        return result

    def _warn_if_composed(self, kind: str, name: str) -> None:
        if self.composition.is_composed():
            logger.warning(
                "%s '%s' declared after targets were composed; it will not be built",
                kind.capitalize(),
                name,
            )

    # Persistence

    def snapshot(self) -> bytes:
        """Serialize registry state, including the composition record."""
        return self._storage.snapshot()

    def restore(self, data: bytes) -> None:
        """Restore registry state from snapshot."""
        self._storage.restore(data)
