"""Persistence layer for meals and their foods."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from nutritrack.domain.entities import Meal, MealFood
from nutritrack.infrastructure.models import MealFoodModel, MealModel

_NUTRIENT_FIELDS = (
    "food_id",
    "food_name",
    "quantity",
    "unit",
    "calories",
    "protein",
    "carbs",
    "fat",
    "fiber",
    "sugar",
    "sodium",
    "calcium",
    "iron",
    "potassium",
    "serving_size",
)


class MealRepository:
    """Provide CRUD operations for meals and meal foods."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, meal: Meal) -> Meal:
        model = MealModel(
            user_id=meal.user_id,
            meal_date=meal.meal_date,
            meal_type=meal.meal_type,
            created_at=meal.created_at,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._meal_to_entity(model)

    def get(self, meal_id: UUID, *, user_id: UUID) -> Meal | None:
        model = self._get_meal_model(meal_id, user_id=user_id)
        return self._meal_to_entity(model) if model else None

    def list_for_user(self, user_id: UUID) -> Sequence[Meal]:
        query = (
            self.session.query(MealModel)
            .filter(MealModel.user_id == user_id)
            .order_by(MealModel.meal_date.desc(), MealModel.created_at.desc())
        )
        return [self._meal_to_entity(model) for model in query.all()]

    def delete(self, meal_id: UUID, *, user_id: UUID) -> int:
        model = self._get_meal_model(meal_id, user_id=user_id)
        if model is None:
            return 0
        # ORM delete so the foods cascade on backends without FK enforcement.
        self.session.delete(model)
        self.session.commit()
        return 1

    def add_food(self, food: MealFood) -> MealFood:
        model = MealFoodModel(meal_id=food.meal_id)
        for field_name in _NUTRIENT_FIELDS:
            setattr(model, field_name, getattr(food, field_name))
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._food_to_entity(model)

    def list_foods(self, meal_id: UUID, *, user_id: UUID) -> Sequence[MealFood]:
        query = (
            self.session.query(MealFoodModel)
            .join(MealModel, MealFoodModel.meal_id == MealModel.id)
            .filter(MealModel.id == meal_id, MealModel.user_id == user_id)
            .order_by(MealFoodModel.food_name.asc(), MealFoodModel.id.asc())
        )
        return [self._food_to_entity(model) for model in query.all()]

    def delete_food(self, food_id: UUID, *, user_id: UUID) -> int:
        owned_meal_ids = select(MealModel.id).where(MealModel.user_id == user_id)
        affected = (
            self.session.query(MealFoodModel)
            .filter(
                MealFoodModel.id == food_id,
                MealFoodModel.meal_id.in_(owned_meal_ids),
            )
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return affected

    def _get_meal_model(self, meal_id: UUID, *, user_id: UUID) -> MealModel | None:
        return (
            self.session.query(MealModel)
            .filter(MealModel.id == meal_id, MealModel.user_id == user_id)
            .first()
        )

    @staticmethod
    def _meal_to_entity(model: MealModel) -> Meal:
        return Meal(
            id=model.id,
            user_id=model.user_id,
            meal_date=model.meal_date,
            meal_type=model.meal_type,
            created_at=model.created_at,
        )

    @staticmethod
    def _food_to_entity(model: MealFoodModel) -> MealFood:
        values = {field_name: getattr(model, field_name) for field_name in _NUTRIENT_FIELDS}
        return MealFood(id=model.id, meal_id=model.meal_id, **values)


__all__ = ["MealRepository"]
