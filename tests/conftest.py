"""Pytest configuration and shared fixtures."""

import os

# Keep the application engine off the production database during tests.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from fitcoach.database import Base  # noqa: E402
from fitcoach.dependencies import (  # noqa: E402
    get_grocery_list_repository,
    get_nutrition_plan_repository,
)
from fitcoach.main import app  # noqa: E402
from fitcoach.repository import GroceryListRepository, NutritionPlanRepository  # noqa: E402

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "db: marks tests that use the in-memory SQLite database")


# =============================================================================
# Plan Document Fixtures
# =============================================================================


def make_meal(name: str, ingredients: list[str] | None) -> dict:
    """Build a meal dict in the stored plan shape."""
    meal = {
        "name": name,
        "nutrition": {"calories": 400, "protein_g": 30, "carbs_g": 40, "fat_g": 12},
    }
    if ingredients is not None:
        meal["ingredients"] = ingredients
    return meal


@pytest.fixture
def sample_plan():
    """Two-day nutrition plan with snacks and a pre-declared shopping list."""
    return {
        "id": "plan-1",
        "user_id": "user-1",
        "name": "7-Day Meal Plan",
        "dietary_preferences": [],
        "plan_overview": {
            "duration_days": 7,
            "daily_calories": 2200,
            "macros": {"calories": 2200, "protein_g": 165, "carbs_g": 220, "fat_g": 73},
        },
        "daily_schedule": {
            "day_1": {
                "breakfast": make_meal(
                    "Protein Oatmeal", ["Rolled oats", "Protein powder", "Banana", "Honey"]
                ),
                "lunch": make_meal(
                    "Chicken Bowl", ["Chicken breast", "Brown rice", "Broccoli", "Olive oil"]
                ),
                "dinner": make_meal(
                    "Salmon Plate", ["Salmon fillet", "Sweet potato", "Asparagus"]
                ),
                "snacks": [make_meal("Greek Yogurt", ["Greek yogurt", "Mixed berries"])],
            },
            "day_2": {
                "breakfast": make_meal("Scrambled Eggs", ["Eggs", "Spinach", "Toast"]),
                "lunch": make_meal("Turkey Wrap", ["Turkey", "Wrap", "Lettuce", "Tomatoes"]),
                "dinner": make_meal(
                    "Beef Stir Fry", ["Beef", "Broccoli", "Soy sauce", "Brown rice"]
                ),
            },
        },
        "shopping_list": {
            "proteins": ["Chicken breast", "Salmon"],
            "vegetables": ["Broccoli", "Spinach"],
        },
    }


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def plan_repository():
    """Mocked plan-fetch service."""
    return AsyncMock(spec=NutritionPlanRepository)


@pytest.fixture
def grocery_list_repository():
    """Mocked list-persistence service echoing created records back with an ID."""
    repository = AsyncMock(spec=GroceryListRepository)
    repository.create.side_effect = lambda data: {"id": "list-1", **data}
    return repository


@pytest.fixture
def client(plan_repository, grocery_list_repository):
    """Test client with repositories replaced by mocks."""
    app.dependency_overrides[get_nutrition_plan_repository] = lambda: plan_repository
    app.dependency_overrides[get_grocery_list_repository] = lambda: grocery_list_repository
    yield TestClient(app)
    app.dependency_overrides.clear()


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def db_session():
    """Async session on a fresh in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()
