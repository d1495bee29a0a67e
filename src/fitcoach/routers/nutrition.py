"""API routes for storing and fetching nutrition plans."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError

from fitcoach.dependencies import get_nutrition_plan_repository
from fitcoach.logging_config import get_logger
from fitcoach.repository import NutritionPlanRepository
from fitcoach.schemas import NutritionPlanCreate

logger = get_logger(__name__)

router = APIRouter(prefix="/api/nutrition", tags=["nutrition"])


@router.get("")
async def get_latest_nutrition_plan(
    user_id: Annotated[str | None, Query(alias="userId")] = None,
    plans: NutritionPlanRepository = Depends(get_nutrition_plan_repository),
) -> dict:
    """Get the user's most recent nutrition plan, or null when there is none."""
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="userId is required",
        )

    try:
        plan = await plans.get_latest_by_user(user_id)
    except SQLAlchemyError as e:
        logger.exception(f"Error fetching nutrition plan for user {user_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch nutrition plan",
        ) from e

    return {"plan": plan}


@router.get("/{plan_id}")
async def get_nutrition_plan(
    plan_id: str,
    plans: NutritionPlanRepository = Depends(get_nutrition_plan_repository),
) -> dict:
    """Get a specific nutrition plan by ID."""
    try:
        plan = await plans.get_by_id(plan_id)
    except SQLAlchemyError as e:
        logger.exception(f"Error fetching nutrition plan {plan_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch nutrition plan",
        ) from e

    if not plan:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Nutrition plan {plan_id} not found",
        )

    return {"plan": plan}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_nutrition_plan(
    request: NutritionPlanCreate,
    plans: NutritionPlanRepository = Depends(get_nutrition_plan_repository),
) -> dict:
    """Store a nutrition plan produced by the plan generator."""
    logger.info(
        f"Storing nutrition plan for user {request.user_id}: "
        f"{len(request.daily_schedule)} days"
    )

    try:
        plan = await plans.create(request.to_document())
    except SQLAlchemyError as e:
        logger.exception("Error storing nutrition plan")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save nutrition plan",
        ) from e

    return {"plan": plan}
