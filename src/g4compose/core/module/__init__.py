"""Module functionality: module records, visibility tiers and property access."""

from g4compose.core.module.models import Module, UsageRequirements, Visibility
from g4compose.core.module.properties import ModuleProperty, get_property, set_property

__all__ = [
    "Module",
    "UsageRequirements",
    "Visibility",
    "ModuleProperty",
    "get_property",
    "set_property",
]
