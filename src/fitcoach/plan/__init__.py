"""Grocery list derivation from nutrition plans."""

from fitcoach.plan.grocery_list import (
    GroceryListItem,
    aggregate_schedule_ingredients,
    extract_grocery_items,
    merge_shopping_list,
    sort_items,
)

__all__ = [
    "GroceryListItem",
    "aggregate_schedule_ingredients",
    "extract_grocery_items",
    "merge_shopping_list",
    "sort_items",
]
