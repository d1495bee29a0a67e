"""Request and response schemas shared by the API routers."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Nutrition Plan Documents
# =============================================================================


class MealNutrition(BaseModel):
    """Macro breakdown for a meal or a whole day."""

    calories: float = 0
    protein_g: float = 0
    carbs_g: float = 0
    fat_g: float = 0


class Meal(BaseModel):
    """Single meal in a day's schedule."""

    name: str
    ingredients: list[str] = Field(default_factory=list)
    instructions: str | None = None
    prep_time_minutes: int | None = Field(None, ge=0)
    nutrition: MealNutrition = Field(default_factory=MealNutrition)


class DayMeals(BaseModel):
    """Meals scheduled for one day of the plan."""

    breakfast: Meal | None = None
    lunch: Meal | None = None
    dinner: Meal | None = None
    snacks: list[Meal] | None = None


class NutritionPlanOverview(BaseModel):
    """Summary targets for a nutrition plan."""

    duration_days: int = Field(7, ge=1)
    daily_calories: float = 0
    macros: MealNutrition = Field(default_factory=MealNutrition)
    key_principles: list[str] | None = None


class NutritionPlanCreate(BaseModel):
    """Nutrition plan document as produced by the plan generator."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId", min_length=1)
    name: str | None = None
    dietary_preferences: list[str] = Field(default_factory=list)
    plan_overview: NutritionPlanOverview = Field(default_factory=NutritionPlanOverview)
    daily_schedule: dict[str, DayMeals] = Field(default_factory=dict)
    shopping_list: dict[str, list[str]] | None = None
    nutrition_tips: list[str] | None = None

    def to_document(self) -> dict[str, Any]:
        """Plain JSON document suitable for storage."""
        return self.model_dump(mode="json")


# =============================================================================
# Grocery Lists
# =============================================================================


class GroceryListItemSchema(BaseModel):
    """Single item in a stored grocery list."""

    name: str
    category: str | None = None
    quantity: str | None = None
    checked: bool = False


class GroceryListGenerateRequest(BaseModel):
    """Request to derive a grocery list from a nutrition plan."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str | None = Field(None, alias="userId")
    plan_id: str | None = Field(None, alias="planId")


class GroceryListUpdateRequest(BaseModel):
    """Partial update of a grocery list; ``id`` selects the list."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str | None = Field(None, min_length=1, max_length=255)
    items: list[GroceryListItemSchema] | None = None
    is_completed: bool | None = None

    def updates(self) -> dict[str, Any]:
        """Fields explicitly sent by the client, excluding ``id``."""
        return self.model_dump(exclude_unset=True, exclude={"id"}, exclude_none=True)
