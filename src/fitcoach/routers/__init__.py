"""API routers for the fitcoach application."""

from fitcoach.routers.grocery_lists import router as grocery_lists_router
from fitcoach.routers.nutrition import router as nutrition_router

__all__ = [
    "grocery_lists_router",
    "nutrition_router",
]
