"""End-to-end composition workflows."""

import pytest

from g4compose import (
    AlreadyComposedError,
    CMakeScriptBackend,
    Project,
    ProjectSettings,
    UncomposedModuleError,
    parse_adjacency_list,
)
from g4compose.core.module import Visibility


@pytest.fixture
def static_project(tmp_path, filesystem):
    settings = ProjectSettings(binary_dir=tmp_path, build_static_libs=True, platform="linux")
    return Project(settings=settings, filesystem=filesystem)


def declare_two_modules(project):
    """Module A links to B, both composed into Lib."""
    project.add_module("A", directory="/src/A", public_headers=["A.hh"], sources=["A.cc"])
    project.add_module("B", directory="/src/B", public_headers=["B.hh"], sources=["B.cc"])
    project.module_link_libraries("A", public=["B"])
    project.add_category("Lib", ["A", "B"])


def test_single_category_from_two_modules(static_project):
    declare_two_modules(static_project)

    result = static_project.compose_targets()

    assert result.target_names() == ["Lib", "Lib-static"]
    shared = result.get_target("Lib")
    assert shared.all_link_libraries() == []
    assert shared.sources == [
        "/src/A/include/A.hh",
        "/src/A/src/A.cc",
        "/src/B/include/B.hh",
        "/src/B/src/B.cc",
    ]
    assert result.install.headers == ["/src/A/include/A.hh", "/src/B/include/B.hh"]


def test_cross_category_links_use_static_variants(static_project):
    declare_two_modules(static_project)
    static_project.add_module("C", directory="/src/C", sources=["C.cc"])
    static_project.module_link_libraries("C", private=["A", "ZLIB::ZLIB"])
    static_project.add_category("Other", ["C"])

    result = static_project.compose_targets()

    assert result.get_target("Other").link_libraries[Visibility.PRIVATE] == [
        "Lib",
        "ZLIB::ZLIB",
    ]
    assert result.get_target("Other-static").link_libraries[Visibility.PRIVATE] == [
        "Lib-static",
        "ZLIB::ZLIB",
    ]


def test_adjacency_list_written_with_raw_references(static_project):
    declare_two_modules(static_project)

    result = static_project.compose_targets()

    records = parse_adjacency_list(result.adjacency_list.read_text(encoding="utf-8"))
    assert [(r.module, r.references) for r in records] == [("A", ["B"]), ("B", [])]


def test_uncomposed_module_blocks_every_target(static_project):
    declare_two_modules(static_project)
    static_project.add_module("Stray", directory="/src/Stray")

    with pytest.raises(UncomposedModuleError):
        static_project.compose_targets()

    assert static_project.backend.target_names() == []
    assert not static_project.settings.adjacency_list_path.exists()


def test_second_composition_fails(static_project):
    declare_two_modules(static_project)
    static_project.compose_targets(origin="/src/CMakeLists.txt")

    with pytest.raises(AlreadyComposedError, match="/src/CMakeLists.txt"):
        static_project.compose_targets()


def test_cmake_script_for_composed_project(tmp_path, filesystem):
    backend = CMakeScriptBackend()
    settings = ProjectSettings(binary_dir=tmp_path, platform="linux")
    project = Project(settings=settings, backend=backend, filesystem=filesystem)
    declare_two_modules(project)

    project.compose_targets()
    script = backend.write(tmp_path / "Geant4Targets.cmake").read_text(encoding="utf-8")

    assert 'add_library(Lib SHARED "")' in script
    assert "add_library(Geant4::Lib ALIAS Lib)" in script
    assert "install(TARGETS Lib" in script
    assert "target_link_libraries(Lib" not in script
