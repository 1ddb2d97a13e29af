"""Pure functions for resolving link references.

Modules declare links to other modules, but only categories are built. These
functions rewrite module-level link lists into library-level ones.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping

from g4compose.core.errors import UnresolvedModuleError
from g4compose.core.types import STATIC_SUFFIX, CategoryName, LinkReference, ModuleName


def static_target_name(name: str) -> str:
    """Name of the static variant of a library target."""
    return f"{name}{STATIC_SUFFIX}"


def deduplicate(values: Iterable[LinkReference]) -> list[LinkReference]:
    """Remove duplicates, keeping the first occurrence of each value."""
    return list(dict.fromkeys(values))


def resolve_link_libraries(
    references: Iterable[LinkReference],
    parents: Mapping[ModuleName, CategoryName | None],
) -> list[LinkReference]:
    """Resolve module references to the categories that own them.

    Args:
        references: Link tokens: module names, category names or external targets.
        parents: Every defined module mapped to its owning category (None
            while the module is not yet composed).

    Returns:
        Resolved references without duplicates. References that are not
        module names pass through unchanged.

    Raises:
        UnresolvedModuleError: If a referenced module has no owning category.
    """
    resolved: list[LinkReference] = []
    for reference in references:
        if reference in parents:
            parent = parents[reference]
            if parent is None:
                raise UnresolvedModuleError(reference)
            resolved.append(parent)
        else:
            resolved.append(reference)
    return deduplicate(resolved)


def strip_self_reference(
    references: Iterable[LinkReference], name: CategoryName
) -> list[LinkReference]:
    """Remove links of a target to itself."""
    return [reference for reference in references if reference != name]


def to_static_references(
    references: Iterable[LinkReference],
    libraries: Collection[CategoryName],
) -> list[LinkReference]:
    """Rewrite references to known libraries to their static variant names.

    Args:
        references: Resolved link references.
        libraries: Names of all defined categories (shared target names).

    Returns:
        References with every library name replaced by ``<name>-static``.
    """
    return [
        static_target_name(reference) if reference in libraries else reference
        for reference in references
    ]
