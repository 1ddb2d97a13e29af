import tempfile
from pathlib import Path

from g4compose import CMakeScriptBackend, Project, ProjectSettings
from g4compose.compat import call


def make_layout(root: Path, *modules: str) -> None:
    """Create the include/src directories each module directory must hold."""
    for module in modules:
        (root / module / "include").mkdir(parents=True)
        (root / module / "src").mkdir()


def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        make_layout(root, "management", "HEPRandom", "intercoms")

        backend = CMakeScriptBackend()
        settings = ProjectSettings(binary_dir=root / "build", build_static_libs=True)
        project = Project(settings=settings, backend=backend)

        # Declarations, as the module scripts would make them
        project.add_module(
            "G4globman",
            directory=root / "management",
            public_headers=["G4Types.hh", "globals.hh"],
            sources=["G4Exception.cc"],
        )
        project.add_module(
            "G4heprandom",
            directory=root / "HEPRandom",
            public_headers=["Randomize.hh"],
            sources=["G4MTHepRandom.cc"],
        )
        project.module_link_libraries("G4heprandom", public=["G4globman"])
        project.add_category("G4global", ["G4globman", "G4heprandom"])

        # The same thing through the command-shaped interface
        call(
            project,
            "geant4_add_module",
            ["G4intercoms", "PUBLIC_HEADERS", "G4UIcommand.hh", "SOURCES", "G4UIcommand.cc"],
            directory=root / "intercoms",
        )
        call(project, "geant4_module_link_libraries", ["G4intercoms", "PUBLIC", "G4globman"])
        call(project, "geant4_add_category", ["G4intercoms", "MODULES", "G4intercoms"])

        result = project.compose_targets(origin="readme_example.py")

        for target in result.targets:
            print(f"{target.name}: links {target.all_link_libraries()}")
        print(result.adjacency_list.read_text(encoding="utf-8"))
        print(backend.render())


if __name__ == "__main__":
    main()
