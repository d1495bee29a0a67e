"""Keyword-based grocery category classification."""

from typing import Literal

Category = Literal["proteins", "dairy", "vegetables", "fruits", "grains", "pantry", "other"]

FALLBACK_CATEGORY: Category = "other"

# Evaluated top to bottom; the first category with a matching keyword wins.
# "pepper" is listed under vegetables before pantry, so it resolves there.
CATEGORY_KEYWORDS: tuple[tuple[Category, tuple[str, ...]], ...] = (
    (
        "proteins",
        (
            "chicken", "beef", "turkey", "salmon", "tuna", "shrimp", "pork", "lamb",
            "fish", "tofu", "tempeh", "steak", "cod", "tilapia", "eggs", "egg",
            "whey", "protein", "sausage", "bacon", "ham", "duck", "venison",
        ),
    ),
    (
        "dairy",
        (
            "milk", "cheese", "yogurt", "cream", "butter", "mozzarella", "parmesan",
            "cheddar", "ricotta", "cottage", "feta", "sour cream", "whipping cream",
        ),
    ),
    (
        "vegetables",
        (
            "broccoli", "spinach", "kale", "lettuce", "tomato", "pepper", "onion",
            "garlic", "carrot", "celery", "cucumber", "zucchini", "asparagus",
            "cauliflower", "cabbage", "mushroom", "peas", "corn", "green beans",
            "arugula", "bok choy", "eggplant", "artichoke", "beet", "radish",
            "greens", "mixed greens", "salad", "squash", "potato", "sweet potato",
        ),
    ),
    (
        "fruits",
        (
            "apple", "banana", "orange", "berry", "berries", "strawberry", "blueberry",
            "raspberry", "grape", "mango", "pineapple", "watermelon", "peach", "pear",
            "lemon", "lime", "avocado", "kiwi", "cherry", "plum", "pomegranate",
            "coconut", "fig", "date",
        ),
    ),
    (
        "grains",
        (
            "rice", "oats", "oatmeal", "bread", "pasta", "quinoa", "barley",
            "tortilla", "wrap", "cereal", "granola", "flour", "noodle", "couscous",
            "bulgur", "farro", "millet", "pita", "bagel", "cracker",
        ),
    ),
    (
        "pantry",
        (
            "oil", "olive oil", "coconut oil", "vinegar", "soy sauce", "salt",
            "pepper", "spice", "cumin", "paprika", "cinnamon", "turmeric", "oregano",
            "basil", "thyme", "rosemary", "honey", "maple syrup", "sugar",
            "cocoa", "chocolate", "vanilla", "baking", "broth", "stock",
            "sauce", "mustard", "ketchup", "mayo", "dressing",
            "almond", "walnut", "cashew", "pecan", "peanut", "nut",
            "seed", "chia", "flax", "pumpkin seed", "sunflower seed",
            "chickpea", "lentil", "bean", "black bean", "kidney bean",
        ),
    ),
)

CATEGORIES: tuple[Category, ...] = tuple(c for c, _ in CATEGORY_KEYWORDS) + (FALLBACK_CATEGORY,)


def categorize_ingredient(ingredient: str) -> Category:
    """
    Assign a grocery category to a normalized ingredient name.

    Keywords match as plain substrings of the lowercased name, so
    "chicken breast" -> "proteins" and "xyzzy" -> "other".
    """
    lower = ingredient.lower()

    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lower for keyword in keywords):
            return category

    return FALLBACK_CATEGORY
