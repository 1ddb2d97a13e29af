"""Link resolution: module references to library references."""

from g4compose.core.link.operations import (
    deduplicate,
    resolve_link_libraries,
    static_target_name,
    strip_self_reference,
    to_static_references,
)

__all__ = [
    "deduplicate",
    "resolve_link_libraries",
    "static_target_name",
    "strip_self_reference",
    "to_static_references",
]
