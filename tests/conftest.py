"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from g4compose import Project, ProjectSettings, RecordingBackend


class FakeFilesystem:
    """Filesystem probe where every path exists unless marked missing."""

    def __init__(self) -> None:
        self.missing: set[str] = set()

    def exists(self, path: str) -> bool:
        return path not in self.missing


@pytest.fixture
def filesystem():
    return FakeFilesystem()


@pytest.fixture
def settings(tmp_path):
    """Settings writing into a temporary build directory."""
    return ProjectSettings(binary_dir=tmp_path, platform="linux")


@pytest.fixture
def backend():
    return RecordingBackend()


@pytest.fixture
def project(settings, backend, filesystem):
    """Fresh Project with a recording backend and fake filesystem."""
    return Project(settings=settings, backend=backend, filesystem=filesystem)


@pytest.fixture
def add_module(project):
    """Declare a module at /src/<name> with one header and one source."""

    def _add(name: str, **kwargs):
        kwargs.setdefault("directory", f"/src/{name}")
        kwargs.setdefault("public_headers", [f"{name}.hh"])
        kwargs.setdefault("sources", [f"{name}.cc"])
        project.add_module(name, **kwargs)
        return name

    return _add
