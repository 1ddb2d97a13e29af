"""Tests for build backends."""

import pytest

from g4compose import Project
from g4compose.composition import (
    BuildBackend,
    CMakeScriptBackend,
    InstallManifest,
    LibraryType,
    PhysicalTarget,
    RecordingBackend,
)
from g4compose.core.module import Visibility


@pytest.fixture
def target() -> PhysicalTarget:
    target = PhysicalTarget(
        name="G4global",
        category="G4global",
        library_type=LibraryType.SHARED,
        alias="Geant4::G4global",
        sources=["/src/G4globman/include/G4Types.hh", "/src/G4globman/src/G4Types.cc"],
        compile_features=["cxx_std_17"],
        properties={"WINDOWS_EXPORT_ALL_SYMBOLS": "ON"},
        source_groups={"G4globman\\Headers": ["/src/G4globman/include/G4Types.hh"]},
        source_compile_definitions={"/src/G4globman/src/G4Types.cc": ["A", "B"]},
    )
    target.include_directories[Visibility.PUBLIC] = [
        "$<BUILD_INTERFACE:/src/G4globman/include>",
        "/opt/clhep/include",
    ]
    target.compile_definitions[Visibility.PUBLIC] = ["G4LIB_BUILD_DLL"]
    target.link_libraries[Visibility.PRIVATE] = ["CLHEP::CLHEP"]
    return target


def test_backends_satisfy_protocol():
    assert isinstance(RecordingBackend(), BuildBackend)
    assert isinstance(CMakeScriptBackend(), BuildBackend)


def test_recording_backend_rejects_duplicate_target(target):
    backend = RecordingBackend()
    backend.add_target(target)

    with pytest.raises(ValueError):
        backend.add_target(target)
    assert backend.target_names() == ["G4global"]


def test_cmake_script_declares_library_and_alias(target):
    backend = CMakeScriptBackend()
    backend.add_target(target)
    script = backend.render()

    assert 'add_library(G4global SHARED "")' in script
    assert "add_library(Geant4::G4global ALIAS G4global)" in script
    assert "target_compile_features(G4global PUBLIC cxx_std_17)" in script


def test_cmake_script_renders_include_directories_as_declared(target):
    backend = CMakeScriptBackend()
    backend.add_target(target)
    script = backend.render()

    assert (
        "target_include_directories(G4global PUBLIC\n"
        "  $<BUILD_INTERFACE:/src/G4globman/include>\n"
        "  /opt/clhep/include\n)"
    ) in script
    assert "$<BUILD_INTERFACE:/opt/clhep/include>" not in script


def test_user_include_directories_are_exported_unwrapped(settings, filesystem):
    """Only the default include directory is restricted to the build tree."""
    backend = CMakeScriptBackend()
    project = Project(settings=settings, backend=backend, filesystem=filesystem)
    project.add_module("G4a", directory="/src/G4a")
    project.module_include_directories("G4a", public=["/opt/clhep/include"])
    project.add_category("G4cat", ["G4a"])

    project.compose_targets()
    script = backend.render()

    assert (
        "target_include_directories(G4cat PUBLIC\n"
        "  $<BUILD_INTERFACE:/src/G4a/include>\n"
        "  /opt/clhep/include\n)"
    ) in script


def test_cmake_script_usage_requirements_per_tier(target):
    backend = CMakeScriptBackend()
    backend.add_target(target)
    script = backend.render()

    assert "target_link_libraries(G4global PRIVATE\n  CLHEP::CLHEP\n)" in script
    assert "target_compile_definitions(G4global PUBLIC\n  G4LIB_BUILD_DLL\n)" in script
    # Empty tiers produce no command
    assert "target_link_libraries(G4global PUBLIC" not in script


def test_cmake_script_properties_and_source_groups(target):
    backend = CMakeScriptBackend()
    backend.add_target(target)
    script = backend.render()

    assert "set_target_properties(G4global PROPERTIES WINDOWS_EXPORT_ALL_SYMBOLS ON)" in script
    assert "source_group(G4globman\\\\Headers FILES" in script
    assert (
        "set_source_files_properties(/src/G4globman/src/G4Types.cc PROPERTIES "
        'COMPILE_DEFINITIONS "A;B")'
    ) in script


def test_cmake_script_quotes_paths_with_spaces():
    target = PhysicalTarget(
        name="G4x",
        category="G4x",
        library_type=LibraryType.STATIC,
        alias="Geant4::G4x",
        sources=["/my src/x.cc"],
    )
    backend = CMakeScriptBackend()
    backend.add_target(target)

    assert '  "/my src/x.cc"' in backend.render()


def test_cmake_script_install_rules(tmp_path):
    backend = CMakeScriptBackend()
    backend.install(
        InstallManifest(
            targets=["G4global", "G4global-static"],
            headers=["/src/G4globman/include/G4Types.hh"],
            header_destination="include/Geant4",
        )
    )
    script = backend.render()

    assert "install(TARGETS G4global G4global-static" in script
    assert "  EXPORT Geant4LibraryDepends" in script
    assert '  DESTINATION "include/Geant4" COMPONENT Development)' in script

    path = backend.write(tmp_path / "cmake" / "Geant4Targets.cmake")
    assert path.read_text(encoding="utf-8") == script
