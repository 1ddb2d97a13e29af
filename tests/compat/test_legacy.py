"""Tests for the legacy declaration facade."""

import pytest

from g4compose import Project, ProjectSettings
from g4compose.compat import (
    add_compile_definitions,
    define_module,
    global_library_target,
    library_target,
)
from g4compose.composition import LibraryType
from g4compose.core.errors import EmptyModuleListError, LegacyTargetError, NotFoundError
from g4compose.core.module import Visibility


def test_define_module_maps_old_arguments(project):
    define_module(
        project,
        name="G4globman",
        directory="/src/G4globman",
        headers=["G4Types.hh"],
        sources=["G4Types.cc"],
        granular_dependencies=["G4heprandom"],
        global_dependencies=["G4global"],
        link_libraries=["CLHEP::CLHEP"],
    )

    module = project.get_module("G4globman")
    assert module.public_headers == ["/src/G4globman/include/G4Types.hh"]
    assert module.public.link_libraries == ["G4heprandom", "CLHEP::CLHEP"]
    assert project.get_module_property("G4globman", "GLOBAL_DEPENDENCIES") == ["G4global"]


def test_deprecation_warning_when_enabled(tmp_path, filesystem):
    settings = ProjectSettings(binary_dir=tmp_path, warn_deprecated=True)
    project = Project(settings=settings, filesystem=filesystem)

    with pytest.warns(DeprecationWarning, match="define_module is deprecated"):
        define_module(project, name="G4globman", directory="/src/G4globman")


def test_global_library_target_composes_new_modules(project, add_module):
    add_module("G4old")
    before = project.get_modules()
    add_module("G4globman")
    add_module("G4heprandom")

    name = global_library_target(
        project, before=before, name="G4global", compile_definitions=["G4GLOBAL_ALLOC"]
    )

    assert name == "G4global"
    assert project.get_category("G4global").modules == ["G4globman", "G4heprandom"]
    assert project.get_module("G4heprandom").private.compile_definitions == ["G4GLOBAL_ALLOC"]
    assert project.get_module_property("G4old", "PARENT_TARGET") is None


def test_global_library_target_defaults_to_first_new_module(project, add_module):
    add_module("G4intercoms")

    assert global_library_target(project, before=()) == "G4intercoms"


def test_global_library_target_without_new_modules(project, add_module):
    add_module("G4a")

    with pytest.raises(EmptyModuleListError):
        global_library_target(project, before=project.get_modules(), name="G4cat")


def test_library_target_rejects_normal_category(project):
    with pytest.raises(LegacyTargetError):
        library_target(project, name="G4global", directory="/src/global")


def test_library_target_builds_bootstrap_library(tmp_path, filesystem, backend):
    settings = ProjectSettings(binary_dir=tmp_path, build_static_libs=True, platform="linux")
    project = Project(settings=settings, filesystem=filesystem, backend=backend)
    library_target(project, name="G4ptl", directory="/ext/ptl", sources=["src/TaskGroup.cc"])

    targets = library_target(
        project,
        name="G4expat",
        directory="/ext/expat",
        sources=["src/xmlparse.c"],
        geant4_link_libraries=["G4ptl"],
        link_libraries=["Threads::Threads"],
    )

    assert [t.name for t in targets] == ["G4expat", "G4expat-static"]
    shared, static = targets
    assert shared.sources == ["/ext/expat/src/xmlparse.c"]
    assert shared.include_directories[Visibility.PUBLIC] == [
        "$<BUILD_INTERFACE:/ext/expat/include>"
    ]
    assert shared.link_libraries[Visibility.PUBLIC] == ["G4ptl", "Threads::Threads"]
    assert static.library_type is LibraryType.STATIC
    assert static.link_libraries[Visibility.PUBLIC] == ["G4ptl-static", "Threads::Threads"]
    assert static.properties["OUTPUT_NAME"] == "G4expat"
    assert "G4expat-static" in backend.target_names()
    assert project.get_category("G4expat").legacy


def test_bootstrap_libraries_are_not_composed_again(project, backend, add_module):
    library_target(project, name="G4clhep", directory="/ext/clhep", sources=["Random.cc"])
    add_module("G4heprandom")
    project.module_link_libraries("G4heprandom", public=["G4clhep"])
    project.add_category("G4global", ["G4heprandom"])

    result = project.compose_targets()

    assert result.target_names() == ["G4global"]
    assert backend.target_names() == ["G4clhep", "G4global"]
    assert result.get_target("G4global").link_libraries[Visibility.PUBLIC] == ["G4clhep"]


def test_add_compile_definitions_targets_declaring_module(project, add_module):
    add_module("G4a", directory="/src/shared", sources=["a.cc"])
    add_module("G4b", directory="/src/shared", sources=["b.cc"])

    add_compile_definitions(
        project, directory="/src/shared", sources=["a.cc", "other.cc"], compile_definitions=["X"]
    )

    assert project.get_module("G4a").source_compile_definitions == {
        "/src/shared/src/a.cc": ["X"]
    }
    assert project.get_module("G4b").source_compile_definitions == {
        "/src/shared/src/other.cc": ["X"]
    }


def test_add_compile_definitions_without_module(project):
    with pytest.raises(NotFoundError):
        add_compile_definitions(
            project, directory="/src/empty", sources=["a.cc"], compile_definitions=["X"]
        )
