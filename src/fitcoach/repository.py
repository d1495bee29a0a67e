"""Persistence for nutrition plans and grocery lists."""

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from fitcoach.logging_config import get_logger
from fitcoach.models import GroceryList, NutritionPlan

logger = get_logger(__name__)

GROCERY_LIST_UPDATABLE_FIELDS = frozenset({"name", "items", "is_completed"})


class NutritionPlanRepository:
    """Loads and stores nutrition plan documents."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, plan_id: str) -> dict[str, Any] | None:
        """Get a plan document by ID."""
        plan = await self.db.get(NutritionPlan, plan_id)
        return plan.to_document() if plan else None

    async def get_latest_by_user(self, user_id: str) -> dict[str, Any] | None:
        """Get the most recently created plan for a user."""
        result = await self.db.execute(
            select(NutritionPlan)
            .where(NutritionPlan.user_id == user_id)
            .order_by(NutritionPlan.created_at.desc())
            .limit(1)
        )
        plan = result.scalar_one_or_none()
        return plan.to_document() if plan else None

    async def create(self, document: dict[str, Any]) -> dict[str, Any]:
        """Store a new plan document and return it with its generated ID."""
        plan = NutritionPlan(
            user_id=document["user_id"],
            name=document.get("name"),
            dietary_preferences=document.get("dietary_preferences") or [],
            plan_overview=document.get("plan_overview") or {},
            daily_schedule=document.get("daily_schedule") or {},
            shopping_list=document.get("shopping_list"),
            nutrition_tips=document.get("nutrition_tips"),
        )
        self.db.add(plan)
        await self.db.commit()
        await self.db.refresh(plan)

        logger.info(f"Stored nutrition plan {plan.id} for user {plan.user_id}")
        return plan.to_document()


class GroceryListRepository:
    """CRUD operations for stored grocery lists."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        """Insert a grocery list record."""
        grocery_list = GroceryList(
            user_id=data["user_id"],
            nutrition_plan_id=data.get("nutrition_plan_id"),
            name=data.get("name") or "Grocery List",
            items=data.get("items") or [],
            is_completed=data.get("is_completed", False),
        )
        self.db.add(grocery_list)
        await self.db.commit()
        await self.db.refresh(grocery_list)

        logger.info(
            f"Created grocery list {grocery_list.id} with {len(grocery_list.items)} items"
        )
        return grocery_list.to_dict()

    async def get_by_user(self, user_id: str) -> list[dict[str, Any]]:
        """List a user's grocery lists, newest first."""
        result = await self.db.execute(
            select(GroceryList)
            .where(GroceryList.user_id == user_id)
            .order_by(GroceryList.created_at.desc())
        )
        return [grocery_list.to_dict() for grocery_list in result.scalars().all()]

    async def update(self, list_id: str, updates: dict[str, Any]) -> dict[str, Any] | None:
        """
        Apply a partial update to a grocery list.

        Only ``name``, ``items`` and ``is_completed`` are writable; other keys
        are ignored. Returns None when the list does not exist.
        """
        grocery_list = await self.db.get(GroceryList, list_id)
        if grocery_list is None:
            return None

        for field_name, value in updates.items():
            if field_name in GROCERY_LIST_UPDATABLE_FIELDS:
                setattr(grocery_list, field_name, value)

        await self.db.commit()
        await self.db.refresh(grocery_list)
        return grocery_list.to_dict()

    async def delete(self, list_id: str) -> None:
        """Delete a grocery list. Deleting a missing list is a no-op."""
        await self.db.execute(delete(GroceryList).where(GroceryList.id == list_id))
        await self.db.commit()
