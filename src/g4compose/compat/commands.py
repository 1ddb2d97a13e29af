"""Dispatch of CMake-shaped developer commands to the Project API.

Lets declarations written as flat command argument lists (as found in the
existing ``sources.cmake`` scripts) drive a Project directly.

Usage:
    call(project, "geant4_add_module",
         ["G4globman", "PUBLIC_HEADERS", "G4Types.hh", "SOURCES", "G4Types.cc"],
         directory="source/global/management")
    call(project, "geant4_add_category", ["G4global", "MODULES", "G4globman"])
    call(project, "geant4_compose_targets", [])
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from g4compose.compat.arguments import parse_arguments
from g4compose.compat.legacy import add_compile_definitions, define_module, library_target
from g4compose.core.errors import InvalidPropertyError
from g4compose.project import Project

_TIERS = ("PUBLIC", "PRIVATE", "INTERFACE")


@dataclass(frozen=True, slots=True)
class CallSite:
    """Where a command is called from: the script directory and file."""

    directory: Path
    origin: str | None = None


def _split_name(command: str, args: Sequence[str]) -> tuple[str, list[str]]:
    if not args:
        raise ValueError(f"{command} requires a name argument")
    return args[0], list(args[1:])


def _add_module(project: Project, args: Sequence[str], site: CallSite) -> None:
    name, rest = _split_name("geant4_add_module", args)
    parsed = parse_arguments(
        "geant4_add_module", rest, multi_value=("PUBLIC_HEADERS", "SOURCES")
    )
    project.add_module(
        name,
        directory=site.directory,
        public_headers=parsed.multi("PUBLIC_HEADERS"),
        sources=parsed.multi("SOURCES"),
        origin=site.origin,
    )


def _tiered(command: str, method: str) -> Callable[[Project, Sequence[str], CallSite], None]:
    def handler(project: Project, args: Sequence[str], site: CallSite) -> None:
        module, rest = _split_name(command, args)
        parsed = parse_arguments(command, rest, multi_value=_TIERS)
        getattr(project, method)(
            module,
            public=parsed.multi("PUBLIC"),
            private=parsed.multi("PRIVATE"),
            interface=parsed.multi("INTERFACE"),
        )

    return handler


def _get_modules(project: Project, args: Sequence[str], site: CallSite) -> tuple[str, ...]:
    parse_arguments("geant4_get_modules", args)
    return project.get_modules()


def _has_module(project: Project, args: Sequence[str], site: CallSite) -> bool:
    name, rest = _split_name("geant4_has_module", args)
    parse_arguments("geant4_has_module", rest)
    return project.has_module(name)


def _get_module_property(project: Project, args: Sequence[str], site: CallSite) -> Any:
    module, rest = _split_name("geant4_get_module_property", args)
    if len(rest) != 1:
        raise ValueError("geant4_get_module_property requires <module> <property>")
    return project.get_module_property(module, rest[0])


def _set_module_property(project: Project, args: Sequence[str], site: CallSite) -> None:
    module, rest = _split_name("geant4_set_module_property", args)
    parsed = parse_arguments(
        "geant4_set_module_property",
        rest,
        options=("APPEND", "APPEND_STRING"),
        multi_value=("PROPERTY",),
    )
    values = parsed.multi("PROPERTY")
    if not values:
        raise InvalidPropertyError("")
    project.set_module_property(
        module,
        values[0],
        *values[1:],
        append=parsed.flag("APPEND"),
        append_string=parsed.flag("APPEND_STRING"),
    )


def _add_category(project: Project, args: Sequence[str], site: CallSite) -> None:
    name, rest = _split_name("geant4_add_category", args)
    parsed = parse_arguments("geant4_add_category", rest, multi_value=("MODULES",))
    project.add_category(name, parsed.multi("MODULES"), origin=site.origin)


def _compose_targets(project: Project, args: Sequence[str], site: CallSite) -> Any:
    parse_arguments("geant4_compose_targets", args)
    return project.compose_targets(origin=site.origin)


def _define_module(project: Project, args: Sequence[str], site: CallSite) -> None:
    parsed = parse_arguments(
        "geant4_define_module",
        args,
        one_value=("NAME",),
        multi_value=(
            "HEADERS",
            "SOURCES",
            "GRANULAR_DEPENDENCIES",
            "GLOBAL_DEPENDENCIES",
            "LINK_LIBRARIES",
        ),
    )
    name = parsed.value("NAME")
    if name is None:
        raise ValueError("geant4_define_module requires a NAME argument")
    define_module(
        project,
        name=name,
        directory=site.directory,
        headers=parsed.multi("HEADERS"),
        sources=parsed.multi("SOURCES"),
        granular_dependencies=parsed.multi("GRANULAR_DEPENDENCIES"),
        global_dependencies=parsed.multi("GLOBAL_DEPENDENCIES"),
        link_libraries=parsed.multi("LINK_LIBRARIES"),
        origin=site.origin,
    )


def _library_target(project: Project, args: Sequence[str], site: CallSite) -> Any:
    parsed = parse_arguments(
        "geant4_library_target",
        args,
        one_value=("NAME",),
        multi_value=("SOURCES", "GEANT4_LINK_LIBRARIES", "LINK_LIBRARIES"),
    )
    name = parsed.value("NAME")
    if name is None:
        raise ValueError("geant4_library_target requires a NAME argument")
    return library_target(
        project,
        name=name,
        directory=site.directory,
        sources=parsed.multi("SOURCES"),
        geant4_link_libraries=parsed.multi("GEANT4_LINK_LIBRARIES"),
        link_libraries=parsed.multi("LINK_LIBRARIES"),
        origin=site.origin,
    )


def _add_compile_definitions(project: Project, args: Sequence[str], site: CallSite) -> None:
    parsed = parse_arguments(
        "geant4_add_compile_definitions",
        args,
        multi_value=("SOURCES", "COMPILE_DEFINITIONS"),
    )
    add_compile_definitions(
        project,
        directory=site.directory,
        sources=parsed.multi("SOURCES"),
        compile_definitions=parsed.multi("COMPILE_DEFINITIONS"),
    )


COMMANDS: dict[str, Callable[[Project, Sequence[str], CallSite], Any]] = {
    "geant4_add_module": _add_module,
    "geant4_module_include_directories": _tiered(
        "geant4_module_include_directories", "module_include_directories"
    ),
    "geant4_module_link_libraries": _tiered(
        "geant4_module_link_libraries", "module_link_libraries"
    ),
    "geant4_module_compile_definitions": _tiered(
        "geant4_module_compile_definitions", "module_compile_definitions"
    ),
    "geant4_get_modules": _get_modules,
    "geant4_has_module": _has_module,
    "geant4_get_module_property": _get_module_property,
    "geant4_set_module_property": _set_module_property,
    "geant4_add_category": _add_category,
    "geant4_compose_targets": _compose_targets,
    "geant4_define_module": _define_module,
    "geant4_library_target": _library_target,
    "geant4_add_compile_definitions": _add_compile_definitions,
}


def call(
    project: Project,
    command: str,
    args: Sequence[str],
    *,
    directory: str | Path | None = None,
    origin: str | None = None,
) -> Any:
    """Run a developer command given as a name and flat argument list.

    Args:
        project: Project to apply the command to.
        command: Command name, e.g. ``geant4_add_module``.
        args: Flat argument list, as written in a build script.
        directory: Directory of the calling script. Defaults to the
            current working directory.
        origin: Calling script, recorded as the declaration site.

    Returns:
        The command's result, for query commands and composition.

    Raises:
        KeyError: If command is unknown.
        UnparsedArgumentsError: If args contain tokens no keyword consumes.
    """
    try:
        handler = COMMANDS[command]
    except KeyError:
        raise KeyError(f"Unknown command '{command}'") from None
    site = CallSite(directory=Path(directory) if directory is not None else Path.cwd(), origin=origin)
    return handler(project, args, site)
