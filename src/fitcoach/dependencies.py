"""FastAPI dependencies providing repositories bound to a request session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fitcoach.database import get_db
from fitcoach.repository import GroceryListRepository, NutritionPlanRepository


async def get_nutrition_plan_repository(
    db: AsyncSession = Depends(get_db),
) -> NutritionPlanRepository:
    """Plan-fetch service for the current request."""
    return NutritionPlanRepository(db)


async def get_grocery_list_repository(
    db: AsyncSession = Depends(get_db),
) -> GroceryListRepository:
    """List-persistence service for the current request."""
    return GroceryListRepository(db)
