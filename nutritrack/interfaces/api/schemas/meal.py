"""Schemas for meals and meal foods."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field

from nutritrack.domain.entities import DEFAULT_FOOD_UNIT, DEFAULT_SERVING_SIZE


class MealCreate(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD or MM/DD/YYYY")
    meal_type: str


class MealRead(BaseModel):
    id: UUID
    user_id: UUID
    date: date
    meal_type: str
    created_at: datetime | None = None


class MealFoodFields(BaseModel):
    food_name: str
    food_id: int | None = None
    quantity: float = 0.0
    unit: str | None = None
    calories: int = 0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0
    calcium: float = 0.0
    iron: float = 0.0
    potassium: float = 0.0
    serving_size: str | None = None


class MealFoodCreate(MealFoodFields):
    meal_id: UUID


class MealFoodRead(MealFoodFields):
    id: UUID
    meal_id: UUID
    unit: str = DEFAULT_FOOD_UNIT
    serving_size: str = DEFAULT_SERVING_SIZE


__all__ = ["MealCreate", "MealFoodCreate", "MealFoodFields", "MealFoodRead", "MealRead"]
