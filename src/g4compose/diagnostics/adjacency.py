"""Module adjacency list: the diagnostic artifact written by composition.

One line per module, ``<module> <raw link references...>``, preceded by a
fixed header line. The format is consumed by an external cycle-detection
tool and must stay stable.

Usage:
    records = build_adjacency_records(modules)
    write_adjacency_list(binary_dir / "G4ModuleAdjacencyList.txt", records)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from g4compose.core.module import Module

logger = logging.getLogger(__name__)

ADJACENCY_HEADER = "# Geant4 Module - Module Adjacencies"


@dataclass(slots=True)
class AdjacencyRecord:
    """Raw (unresolved) links of one module, all visibility tiers."""

    module: str
    references: list[str] = field(default_factory=list)

    def to_line(self) -> str:
        # Module name is always followed by a space, even with no references
        return f"{self.module} {' '.join(self.references)}"

    @classmethod
    def from_line(cls, line: str) -> AdjacencyRecord:
        module, _, rest = line.partition(" ")
        return cls(module=module, references=rest.split())


def build_adjacency_records(modules: Iterable[Module]) -> list[AdjacencyRecord]:
    """Collect public, private and interface links of each module, in order."""
    return [
        AdjacencyRecord(module=module.name, references=module.all_link_libraries())
        for module in modules
    ]


def render_adjacency_list(records: Iterable[AdjacencyRecord]) -> str:
    lines = [ADJACENCY_HEADER, *(record.to_line() for record in records)]
    return "\n".join(lines) + "\n"


def write_adjacency_list(path: Path, records: Iterable[AdjacencyRecord]) -> Path:
    """Write the adjacency list, replacing any previous content.

    Args:
        path: Destination file. Parent directories are created.
        records: Records in module declaration order.

    Returns:
        The path written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_adjacency_list(records), encoding="utf-8")
    logger.debug("Wrote module adjacency list to %s", path)
    return path


def parse_adjacency_list(text: str) -> list[AdjacencyRecord]:
    """Parse adjacency list text back into records.

    The header line, comments and blank lines are skipped.
    """
    records: list[AdjacencyRecord] = []
    for line in text.splitlines():
        if not line.strip() or line.startswith("#"):
            continue
        records.append(AdjacencyRecord.from_line(line))
    return records
