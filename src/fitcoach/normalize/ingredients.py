"""Ingredient string normalization for grocery list extraction."""

import re

# =============================================================================
# Quantity / Unit Patterns
# =============================================================================

# Units recognised as the leading token of an ingredient mention. An optional
# trailing "s" is accepted for every entry.
LEADING_UNITS: tuple[str, ...] = (
    "g",
    "kg",
    "ml",
    "l",
    "oz",
    "lb",
    "cup",
    "cups",
    "tbsp",
    "tsp",
    "tablespoon",
    "teaspoon",
    "bunch",
    "head",
    "clove",
    "cloves",
    "piece",
    "pieces",
    "slice",
    "slices",
    "handful",
    "pinch",
)

# "2 cups", "1/2 tsp", "1 1/2 tbsp", "500g"
QUANTITY_UNIT_PATTERN = re.compile(
    r"^\d+[\s/]*\d*\s*(?:" + "|".join(LEADING_UNITS) + r")s?\b\s*",
    re.IGNORECASE | re.ASCII,
)

# "2 eggs" -> "eggs"
BARE_QUANTITY_PATTERN = re.compile(r"^\d+[\s/]*\d*\s*", re.ASCII)

# "(washed)", "(about 200g)"
PARENTHETICAL_PATTERN = re.compile(r"\s*\(.*?\)\s*", re.ASCII)


# =============================================================================
# Normalization
# =============================================================================


def normalize_ingredient(ingredient: str) -> str:
    """
    Strip quantity, unit and parenthetical noise from an ingredient mention.

    Examples:
        "2 cups spinach (washed)" -> "spinach"
        "1/2 tsp salt" -> "salt"
        "2 eggs" -> "eggs"
        "Chicken Breast" -> "Chicken Breast"

    At most one leading quantity+unit token is removed, then any bare number
    left at the front. Parentheticals go together with the whitespace around
    them, so "rice (cooked) bowl" becomes "ricebowl". The result may be empty.
    """
    text = QUANTITY_UNIT_PATTERN.sub("", ingredient.strip(), count=1)
    text = BARE_QUANTITY_PATTERN.sub("", text, count=1)
    text = PARENTHETICAL_PATTERN.sub("", text)
    return text.strip()


def title_case(text: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    return text[:1].upper() + text[1:]
