"""API routes for grocery list generation and management."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError

from fitcoach.config import settings
from fitcoach.dependencies import get_grocery_list_repository, get_nutrition_plan_repository
from fitcoach.logging_config import LoggingContext, get_logger
from fitcoach.plan.grocery_list import extract_grocery_items
from fitcoach.repository import GroceryListRepository, NutritionPlanRepository
from fitcoach.schemas import GroceryListGenerateRequest, GroceryListUpdateRequest

logger = get_logger(__name__)

router = APIRouter(prefix="/api/grocery-lists", tags=["grocery-lists"])


def grocery_list_name(plan: dict[str, Any]) -> str:
    """Display name for a list derived from ``plan``."""
    return f"Grocery List - {plan.get('name') or settings.default_plan_name}"


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/generate")
async def generate_grocery_list(
    request: GroceryListGenerateRequest,
    plans: NutritionPlanRepository = Depends(get_nutrition_plan_repository),
    lists: GroceryListRepository = Depends(get_grocery_list_repository),
) -> dict:
    """
    Derive a grocery list from a nutrition plan and store it.

    Uses the plan given by ``planId``, or the user's latest plan when omitted.
    """
    if not request.user_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="userId is required",
        )

    with LoggingContext(user_id=request.user_id, plan_id=request.plan_id):
        try:
            if request.plan_id:
                plan = await plans.get_by_id(request.plan_id)
            else:
                plan = await plans.get_latest_by_user(request.user_id)

            if not plan:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail="No nutrition plan found. Generate a meal plan first.",
                )

            items = extract_grocery_items(plan)

            if not items:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="No ingredients found in the meal plan",
                )

            grocery_list = await lists.create(
                {
                    "user_id": request.user_id,
                    "nutrition_plan_id": plan["id"],
                    "name": grocery_list_name(plan),
                    "items": [item.to_dict() for item in items],
                    "is_completed": False,
                }
            )
        except HTTPException:
            raise
        except Exception as e:
            logger.exception("Error generating grocery list")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to generate grocery list",
            ) from e

        logger.info(f"Generated grocery list {grocery_list['id']} with {len(items)} items")

    return {"list": grocery_list}


@router.get("")
async def list_grocery_lists(
    user_id: Annotated[str | None, Query(alias="userId")] = None,
    lists: GroceryListRepository = Depends(get_grocery_list_repository),
) -> dict:
    """List a user's grocery lists, newest first."""
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="userId is required",
        )

    try:
        grocery_lists = await lists.get_by_user(user_id)
    except SQLAlchemyError as e:
        logger.exception("Error fetching grocery lists")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch grocery lists",
        ) from e

    return {"lists": grocery_lists}


@router.patch("")
async def update_grocery_list(
    request: GroceryListUpdateRequest,
    lists: GroceryListRepository = Depends(get_grocery_list_repository),
) -> dict:
    """Update a grocery list's name, items or completion flag."""
    if not request.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="id is required",
        )

    try:
        grocery_list = await lists.update(request.id, request.updates())
    except SQLAlchemyError as e:
        logger.exception(f"Error updating grocery list {request.id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update grocery list",
        ) from e

    if grocery_list is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Grocery list not found",
        )

    return {"list": grocery_list}


@router.delete("")
async def delete_grocery_list(
    list_id: Annotated[str | None, Query(alias="id")] = None,
    lists: GroceryListRepository = Depends(get_grocery_list_repository),
) -> dict:
    """Delete a grocery list."""
    if not list_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="id is required",
        )

    try:
        await lists.delete(list_id)
    except SQLAlchemyError as e:
        logger.exception(f"Error deleting grocery list {list_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete grocery list",
        ) from e

    logger.info(f"Deleted grocery list {list_id}")
    return {"success": True}
