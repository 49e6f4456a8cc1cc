"""Use cases for logging meals and the foods eaten with them."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date, datetime
from typing import Any
from uuid import UUID

from sqlalchemy.orm import Session

from nutritrack.domain.entities import (
    DEFAULT_FOOD_UNIT,
    DEFAULT_SERVING_SIZE,
    Meal,
    MealFood,
    MutationResult,
)
from nutritrack.infrastructure.repositories import MealRepository

MEAL_DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y")


def parse_meal_date(raw: str) -> date:
    """Accept ``YYYY-MM-DD`` or ``MM/DD/YYYY``."""

    value = (raw or "").strip()
    for fmt in MEAL_DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise ValueError("date format must be YYYY-MM-DD or MM/DD/YYYY")


def create_meal(
    session: Session, *, user_id: UUID, meal_date: str, meal_type: str, now: datetime
) -> Meal:
    meal_type = (meal_type or "").strip()
    if not meal_type:
        raise ValueError("meal_type is required")
    meal = Meal(
        id=None,
        user_id=user_id,
        meal_date=parse_meal_date(meal_date),
        meal_type=meal_type,
        created_at=now,
    )
    return MealRepository(session).create(meal)


def list_meals(session: Session, user_id: UUID) -> Sequence[Meal]:
    return MealRepository(session).list_for_user(user_id)


def delete_meal(session: Session, meal_id: UUID, *, user_id: UUID) -> MutationResult:
    """Delete the meal together with its foods."""

    affected = MealRepository(session).delete(meal_id, user_id=user_id)
    return MutationResult.APPLIED if affected else MutationResult.NOOP


def add_meal_food(
    session: Session, *, user_id: UUID, meal_id: UUID, values: Mapping[str, Any]
) -> MealFood | None:
    """Attach a food to one of the user's meals; ``None`` when the meal is not theirs."""

    repository = MealRepository(session)
    if repository.get(meal_id, user_id=user_id) is None:
        return None

    food_name = str(values.get("food_name") or "").strip()
    if not food_name:
        raise ValueError("food_name is required")

    fields = {key: value for key, value in values.items() if value is not None}
    fields["food_name"] = food_name
    fields["unit"] = fields.get("unit") or DEFAULT_FOOD_UNIT
    fields["serving_size"] = fields.get("serving_size") or DEFAULT_SERVING_SIZE
    fields.pop("meal_id", None)
    food = MealFood(id=None, meal_id=meal_id, **fields)
    return repository.add_food(food)


def list_meal_foods(
    session: Session, meal_id: UUID, *, user_id: UUID
) -> Sequence[MealFood] | None:
    repository = MealRepository(session)
    if repository.get(meal_id, user_id=user_id) is None:
        return None
    return repository.list_foods(meal_id, user_id=user_id)


def delete_meal_food(session: Session, food_id: UUID, *, user_id: UUID) -> MutationResult:
    affected = MealRepository(session).delete_food(food_id, user_id=user_id)
    return MutationResult.APPLIED if affected else MutationResult.NOOP
