"""Domain entities for logged meals and the foods they contain."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

DEFAULT_FOOD_UNIT = "g"
DEFAULT_SERVING_SIZE = "100 g"


@dataclass
class Meal:
    """A meal (breakfast, lunch, ...) logged on a given day."""

    id: UUID | None
    user_id: UUID
    meal_date: date
    meal_type: str
    created_at: datetime | None = None


@dataclass
class MealFood:
    """Nutritional breakdown of a food item eaten as part of a meal."""

    id: UUID | None
    meal_id: UUID
    food_name: str
    food_id: int | None = None
    quantity: float = 0.0
    unit: str = DEFAULT_FOOD_UNIT
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
    serving_size: str = DEFAULT_SERVING_SIZE


__all__ = ["DEFAULT_FOOD_UNIT", "DEFAULT_SERVING_SIZE", "Meal", "MealFood"]
