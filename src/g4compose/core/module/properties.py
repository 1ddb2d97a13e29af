"""Whitelist-checked generic property access on modules.

Module attributes are typed fields on :class:`Module`. This module is the thin
string-keyed shim over those fields for tools that introspect modules by
property name, with the same names the CMake developer API uses.

Usage:
    set_property(module, "PUBLIC_LINK_LIBRARIES", ["G4globman"], append=True)
    get_property(module, ModuleProperty.PUBLIC_LINK_LIBRARIES)
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum

from g4compose.core.errors import (
    AlreadyComposedError,
    ConflictingModeError,
    InvalidPropertyError,
)
from g4compose.core.module.models import Module, Visibility


class ModuleProperty(Enum):
    """The fixed set of valid module property names."""

    PUBLIC_HEADERS = "PUBLIC_HEADERS"
    PRIVATE_HEADERS = "PRIVATE_HEADERS"
    SOURCES = "SOURCES"
    PUBLIC_COMPILE_DEFINITIONS = "PUBLIC_COMPILE_DEFINITIONS"
    PRIVATE_COMPILE_DEFINITIONS = "PRIVATE_COMPILE_DEFINITIONS"
    INTERFACE_COMPILE_DEFINITIONS = "INTERFACE_COMPILE_DEFINITIONS"
    PUBLIC_INCLUDE_DIRECTORIES = "PUBLIC_INCLUDE_DIRECTORIES"
    PRIVATE_INCLUDE_DIRECTORIES = "PRIVATE_INCLUDE_DIRECTORIES"
    INTERFACE_INCLUDE_DIRECTORIES = "INTERFACE_INCLUDE_DIRECTORIES"
    PUBLIC_LINK_LIBRARIES = "PUBLIC_LINK_LIBRARIES"
    PRIVATE_LINK_LIBRARIES = "PRIVATE_LINK_LIBRARIES"
    INTERFACE_LINK_LIBRARIES = "INTERFACE_LINK_LIBRARIES"
    PARENT_TARGET = "PARENT_TARGET"
    CMAKE_LIST_FILE = "CMAKE_LIST_FILE"
    GLOBAL_DEPENDENCIES = "GLOBAL_DEPENDENCIES"

    @classmethod
    def parse(cls, name: str | ModuleProperty) -> ModuleProperty:
        """Validate a property name against the whitelist.

        Raises:
            InvalidPropertyError: If name is not a module property.
        """
        if isinstance(name, ModuleProperty):
            return name
        try:
            return cls(name)
        except ValueError:
            raise InvalidPropertyError(str(name)) from None

    def is_scalar(self) -> bool:
        return self in (ModuleProperty.PARENT_TARGET, ModuleProperty.CMAKE_LIST_FILE)


_SCALAR_ATTRIBUTES = {
    ModuleProperty.PARENT_TARGET: "parent_target",
    ModuleProperty.CMAKE_LIST_FILE: "list_file",
}


def _list_accessor(prop: ModuleProperty) -> Callable[[Module], list[str]]:
    """Map a list-valued property to a function returning the backing list."""
    simple = {
        ModuleProperty.PUBLIC_HEADERS: lambda m: m.public_headers,
        ModuleProperty.PRIVATE_HEADERS: lambda m: m.private_headers,
        ModuleProperty.SOURCES: lambda m: m.sources,
        ModuleProperty.GLOBAL_DEPENDENCIES: lambda m: m.global_dependencies,
    }
    if prop in simple:
        return simple[prop]

    tier, _, kind = prop.value.partition("_")
    visibility = Visibility(tier)
    attribute = kind.lower()
    return lambda m: getattr(m.requirements(visibility), attribute)


def get_property(module: Module, name: str | ModuleProperty) -> list[str] | str | None:
    """Get a module property by name.

    Returns:
        A copy of the list for list-valued properties, the string (or None
        if unset) for PARENT_TARGET and CMAKE_LIST_FILE.

    Raises:
        InvalidPropertyError: If name is not a module property.
    """
    prop = ModuleProperty.parse(name)
    if prop.is_scalar():
        return getattr(module, _SCALAR_ATTRIBUTES[prop])
    return list(_list_accessor(prop)(module))


def set_property(
    module: Module,
    name: str | ModuleProperty,
    values: Sequence[str],
    *,
    append: bool = False,
    append_string: bool = False,
) -> None:
    """Set a module property by name.

    Args:
        module: Module to modify in place.
        name: Property name, validated against the whitelist.
        values: Values to set or append.
        append: Append values to the existing value as list elements.
        append_string: Append the concatenated values to the existing value
            as a string (to the last element, for list properties).

    Raises:
        InvalidPropertyError: If name is not a module property.
        ConflictingModeError: If both append and append_string are set.
        AlreadyComposedError: If PARENT_TARGET is already set on the module.
    """
    if append and append_string:
        raise ConflictingModeError(
            "set_module_property: cannot set both APPEND and APPEND_STRING"
        )
    prop = ModuleProperty.parse(name)
    values = list(values)

    if prop.is_scalar():
        attribute = _SCALAR_ATTRIBUTES[prop]
        existing: str | None = getattr(module, attribute)
        if prop is ModuleProperty.PARENT_TARGET and existing is not None:
            raise AlreadyComposedError.for_module(module.name, existing, ";".join(values))
        if append and existing:
            new_value = ";".join([existing, *values])
        elif append_string and existing:
            new_value = existing + "".join(values)
        else:
            new_value = ";".join(values) if values else None
        setattr(module, attribute, new_value)
        return

    target = _list_accessor(prop)(module)
    if append:
        target.extend(values)
    elif append_string:
        if target:
            target[-1] += "".join(values)
        elif values:
            target.append("".join(values))
    else:
        target[:] = values
