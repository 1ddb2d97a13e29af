"""Configuration settings using Pydantic Settings.

Provides typed build configuration with environment variable support.

Usage:
    from g4compose.config import ProjectSettings

    # Load from environment variables (GEANT4_*)
    settings = ProjectSettings()

    # Or override with explicit values
    settings = ProjectSettings(build_static_libs=True, binary_dir="build")
"""

from __future__ import annotations

import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EXCLUDED_CATEGORIES = [
    "G4clhep",
    "G4clhep-static",
    "G4expat",
    "G4expat-static",
    "G4ptl",
    "G4ptl-static",
]
DEFAULT_AUTOMOC_MODULES = ["G4UIbasic", "G4OpenGL", "G4OpenInventor", "G4ToolsSG"]


class ProjectSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for declaring and composing a project.

    Attributes:
        build_shared_libs: Build the shared variant of every category.
        build_static_libs: Build the static (``<name>-static``) variant.
        excluded_categories: Categories whose targets are built by the legacy
            eager path and must not be built again by composition.
        binary_dir: Build directory; the adjacency list is written here.
        adjacency_list_name: File name of the module adjacency list.
        project_name: Project name, used for the header install directory.
        target_namespace: Prefix of the alias created for each target.
        export_set: Install export set the targets are added to.
        install_libdir: Install destination for libraries and archives.
        install_bindir: Install destination for runtime DLLs.
        install_includedir: Install destination root for public headers.
        compile_features: Public compile features applied to every target.
        shared_compile_definitions: Public definitions for shared targets.
        use_qt: Qt support is enabled.
        automoc_modules: Modules whose library needs AUTOMOC when Qt is used.
        platform: Target platform string in ``sys.platform`` form.
        warn_deprecated: Issue DeprecationWarning from legacy commands.

    Environment Variables:
        GEANT4_BUILD_SHARED_LIBS
        GEANT4_BUILD_STATIC_LIBS
        GEANT4_EXCLUDED_CATEGORIES (JSON list)
        GEANT4_BINARY_DIR
        GEANT4_USE_QT
        GEANT4_WARN_DEPRECATED
        ... one per attribute
    """

    model_config = SettingsConfigDict(
        env_prefix="GEANT4_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    build_shared_libs: bool = True
    build_static_libs: bool = False
    excluded_categories: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDED_CATEGORIES)
    )
    binary_dir: Path = Path(".")
    adjacency_list_name: str = "G4ModuleAdjacencyList.txt"
    project_name: str = "Geant4"
    target_namespace: str = "Geant4::"
    export_set: str = "Geant4LibraryDepends"
    install_libdir: str = "lib"
    install_bindir: str = "bin"
    install_includedir: str = "include"
    compile_features: list[str] = Field(default_factory=lambda: ["cxx_std_17"])
    shared_compile_definitions: list[str] = Field(default_factory=lambda: ["G4LIB_BUILD_DLL"])
    use_qt: bool = False
    automoc_modules: list[str] = Field(default_factory=lambda: list(DEFAULT_AUTOMOC_MODULES))
    platform: str = sys.platform
    warn_deprecated: bool = False

    @property
    def adjacency_list_path(self) -> Path:
        return self.binary_dir / self.adjacency_list_name

    @property
    def header_install_dir(self) -> str:
        return f"{self.install_includedir}/{self.project_name}"

    def is_windows(self) -> bool:
        return self.platform.startswith("win")

    def is_macos(self) -> bool:
        return self.platform == "darwin"

    def is_excluded(self, category: str) -> bool:
        return category in self.excluded_categories
