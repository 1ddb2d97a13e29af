"""Project state and declaration management.

Architecture Note:
    project/ is the stateful service layer. Unlike core/ (stateless models
    and functions), a Project owns the registry storage and the one-shot
    composition state.
"""

from g4compose.project.filesystem import Filesystem, LocalFilesystem
from g4compose.project.project import Project

__all__ = [
    "Project",
    "Filesystem",
    "LocalFilesystem",
]
