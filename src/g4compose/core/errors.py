"""Error hierarchy for module declaration and target composition.

Every error aborts the configuration pass. Nothing in g4compose catches
these: they propagate to the caller with enough context (module/category
name, declaration site) to locate the offending declaration.
"""

from __future__ import annotations


class Geant4BuildError(Exception):
    """Base class for all g4compose errors."""

    pass


class AlreadyExistsError(Geant4BuildError):
    """Raised when a module or category name is declared twice."""

    def __init__(self, kind: str, name: str, origin: str | None = None):
        self.kind = kind
        self.name = name
        self.origin = origin
        message = f"Geant4 {kind} '{name}' has already been created"
        if origin:
            message += f" by call in '{origin}'"
        super().__init__(message)


class NotFoundError(Geant4BuildError):
    """Raised when a module or category is referenced before declaration."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Geant4 {kind} '{name}' has not been created")


class AlreadyComposedError(Geant4BuildError):
    """Raised on a second composition of a module, or a second compose pass.

    For a module, ``category`` is the category that already owns it. For a
    repeated compose pass, ``origin`` is where the first pass was called from.
    """

    def __init__(
        self,
        message: str,
        *,
        module: str | None = None,
        category: str | None = None,
        origin: str | None = None,
    ):
        self.module = module
        self.category = category
        self.origin = origin
        super().__init__(message)

    @classmethod
    def for_module(cls, module: str, existing: str, requested: str) -> AlreadyComposedError:
        return cls(
            f"trying to compose category '{requested}' using module '{module}' "
            f"which is already composed into category '{existing}'",
            module=module,
            category=existing,
        )

    @classmethod
    def for_targets(cls, origin: str | None) -> AlreadyComposedError:
        return cls(
            f"compose_targets already called from {origin or '<unknown>'}", origin=origin
        )


class EmptyModuleListError(Geant4BuildError):
    """Raised when a category is declared without modules."""

    def __init__(self, category: str | None):
        self.category = category
        super().__init__(f"Category '{category}' declared with a missing/empty module list")


class MissingLayoutError(Geant4BuildError):
    """Raised when a module directory lacks its include/src subdirectory."""

    def __init__(self, module: str, subdirectory: str, directory: str):
        self.module = module
        self.subdirectory = subdirectory
        self.directory = directory
        super().__init__(
            f"Missing required '{subdirectory}' subdirectory for module "
            f"'{module}' at '{directory}'"
        )


class InvalidPropertyError(Geant4BuildError):
    """Raised for a property name outside the module property whitelist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undefined property '{name}'")


class ConflictingModeError(Geant4BuildError):
    """Raised when append-list and append-string are requested together."""

    pass


class UncomposedModuleError(Geant4BuildError):
    """Raised by compose when a declared module has no owning category."""

    def __init__(self, module: str):
        self.module = module
        super().__init__(f"Geant4 module '{module}' is not composed into any category")


class UnresolvedModuleError(Geant4BuildError):
    """Raised when a module link reference is resolved before composition."""

    def __init__(self, module: str):
        self.module = module
        super().__init__(
            f"Cannot resolve link to Geant4 module '{module}': "
            f"it is not composed into any category yet"
        )


class UnparsedArgumentsError(Geant4BuildError):
    """Raised when a command-style argument list has leftover arguments."""

    def __init__(self, command: str, arguments: list[str]):
        self.command = command
        self.arguments = arguments
        super().__init__(f"{command} called with unparsed arguments: '{';'.join(arguments)}'")


class LegacyTargetError(Geant4BuildError):
    """Raised when the legacy eager library path is used for a normal category."""

    def __init__(self, name: str, directory: str):
        self.name = name
        self.directory = directory
        super().__init__(f"library_target called for '{name}' in '{directory}'")


class InvalidLibraryTypeError(Geant4BuildError):
    """Raised for a library type other than SHARED or STATIC."""

    def __init__(self, library_type: str):
        self.library_type = library_type
        super().__init__(f"Invalid library type '{library_type}'")
