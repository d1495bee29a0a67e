"""SQLAlchemy database models."""

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fitcoach.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NutritionPlan(Base):
    """AI-generated weekly nutrition plan stored for a user."""

    __tablename__ = "nutrition_plans"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column(String, nullable=False)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    dietary_preferences: Mapped[list] = mapped_column(JSON, default=list)
    plan_overview: Mapped[dict] = mapped_column(JSON, default=dict)
    daily_schedule: Mapped[dict] = mapped_column(JSON, default=dict)
    shopping_list: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    nutrition_tips: Mapped[list | None] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )

    grocery_lists: Mapped[list["GroceryList"]] = relationship(
        "GroceryList", back_populates="nutrition_plan"
    )

    __table_args__ = (Index("idx_nutrition_plans_user_created", "user_id", "created_at"),)

    def to_document(self) -> dict[str, Any]:
        """Plan as the JSON document handed to clients and the grocery pipeline."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "dietary_preferences": self.dietary_preferences or [],
            "plan_overview": self.plan_overview or {},
            "daily_schedule": self.daily_schedule,
            "shopping_list": self.shopping_list,
            "nutrition_tips": self.nutrition_tips,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


class GroceryList(Base):
    """Grocery list derived from a nutrition plan."""

    __tablename__ = "grocery_lists"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column(String, nullable=False)
    nutrition_plan_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("nutrition_plans.id", ondelete="SET NULL"), nullable=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="Grocery List")
    items: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    is_completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )

    nutrition_plan: Mapped["NutritionPlan | None"] = relationship(
        "NutritionPlan", back_populates="grocery_lists"
    )

    __table_args__ = (Index("idx_grocery_lists_user_created", "user_id", "created_at"),)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the API record shape."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "nutrition_plan_id": self.nutrition_plan_id,
            "name": self.name,
            "items": self.items or [],
            "is_completed": self.is_completed,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
