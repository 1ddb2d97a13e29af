"""Diagnostic artifacts produced by composition."""

from g4compose.diagnostics.adjacency import (
    ADJACENCY_HEADER,
    AdjacencyRecord,
    build_adjacency_records,
    parse_adjacency_list,
    render_adjacency_list,
    write_adjacency_list,
)

__all__ = [
    "ADJACENCY_HEADER",
    "AdjacencyRecord",
    "build_adjacency_records",
    "parse_adjacency_list",
    "render_adjacency_list",
    "write_adjacency_list",
]
