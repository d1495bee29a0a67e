"""Normalize and classify raw ingredient mentions."""

from fitcoach.normalize.categories import (
    CATEGORIES,
    CATEGORY_KEYWORDS,
    Category,
    categorize_ingredient,
)
from fitcoach.normalize.ingredients import normalize_ingredient, title_case

__all__ = [
    "CATEGORIES",
    "CATEGORY_KEYWORDS",
    "Category",
    "categorize_ingredient",
    "normalize_ingredient",
    "title_case",
]
