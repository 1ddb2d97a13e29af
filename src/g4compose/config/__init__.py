"""Configuration module using Pydantic Settings.

Provides typed configuration for projects with environment variable support.

Usage:
    from g4compose.config import ProjectSettings

    settings = ProjectSettings(build_static_libs=True)
"""

from g4compose.config.settings import ProjectSettings

__all__ = [
    "ProjectSettings",
]
