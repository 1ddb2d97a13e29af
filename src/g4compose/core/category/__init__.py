"""Category functionality: named libraries composed from modules."""

from g4compose.core.category.models import Category

__all__ = [
    "Category",
]
