"""Grocery list derivation from nutrition plans."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from fitcoach.logging_config import get_logger
from fitcoach.normalize.categories import categorize_ingredient
from fitcoach.normalize.ingredients import normalize_ingredient, title_case

logger = get_logger(__name__)

MIN_KEY_LENGTH = 2

MEAL_SLOTS = ("breakfast", "lunch", "dinner")


@dataclass
class GroceryListItem:
    """A single entry in a grocery list."""

    name: str
    category: str
    quantity: str | None = None  # first raw mention, display only
    checked: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the stored JSON shape, omitting an unset quantity."""
        data: dict[str, Any] = {"name": self.name, "category": self.category}
        if self.quantity is not None:
            data["quantity"] = self.quantity
        data["checked"] = self.checked
        return data


def iter_day_meals(day: Mapping[str, Any]) -> Iterable[Mapping[str, Any]]:
    """Yield a day's meals in breakfast, lunch, dinner, snacks order."""
    meals = [day.get(slot) for slot in MEAL_SLOTS]
    meals.extend(day.get("snacks") or [])

    for meal in meals:
        if meal:
            yield meal


def aggregate_schedule_ingredients(
    daily_schedule: Mapping[str, Any] | None,
    items: dict[str, GroceryListItem],
) -> None:
    """
    Add every ingredient mention from a daily schedule to ``items``.

    ``items`` is keyed by the lowercased normalized name. Existing keys are
    never overwritten, so the first mention decides name, category and
    quantity text.
    """
    if not daily_schedule:
        return

    for day in daily_schedule.values():
        if not day:
            continue

        for meal in iter_day_meals(day):
            for raw_ingredient in meal.get("ingredients") or []:
                normalized = normalize_ingredient(raw_ingredient)
                key = normalized.lower()

                if len(key) < MIN_KEY_LENGTH:
                    continue

                if key not in items:
                    items[key] = GroceryListItem(
                        name=title_case(normalized),
                        category=categorize_ingredient(normalized),
                        quantity=raw_ingredient,
                    )


def merge_shopping_list(
    shopping_list: Mapping[str, Iterable[str]] | None,
    items: dict[str, GroceryListItem],
) -> None:
    """
    Fold a plan's pre-declared shopping list into ``items``.

    The shopping list's category names are kept verbatim. Items already
    present keep their schedule-derived entry.
    """
    if not shopping_list:
        return

    for category, names in shopping_list.items():
        for name in names or []:
            key = name.lower().strip()

            if len(key) < MIN_KEY_LENGTH:
                continue

            if key not in items:
                items[key] = GroceryListItem(name=title_case(name), category=category)


def sort_items(items: Iterable[GroceryListItem]) -> list[GroceryListItem]:
    """Order items by category, then by name."""
    return sorted(items, key=lambda item: (item.category or "", item.name))


def extract_grocery_items(plan: Mapping[str, Any]) -> list[GroceryListItem]:
    """
    Derive a deduplicated, categorized grocery list from a nutrition plan.

    Args:
        plan: Nutrition plan document with ``daily_schedule`` and an optional
            ``shopping_list`` mapping category names to item names.

    Returns:
        Items sorted by category then name. A plan without a
        ``daily_schedule`` yields an empty list, shopping list included.
    """
    daily_schedule = plan.get("daily_schedule")
    if daily_schedule is None:
        return []

    items: dict[str, GroceryListItem] = {}

    aggregate_schedule_ingredients(daily_schedule, items)
    merge_shopping_list(plan.get("shopping_list"), items)

    result = sort_items(items.values())

    logger.debug(f"Extracted {len(result)} grocery items from plan {plan.get('id')}")

    return result
