"""Endpoints for logging meals and their foods."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from nutritrack.application.use_cases.meals import (
    add_meal_food,
    create_meal,
    delete_meal,
    delete_meal_food,
    list_meal_foods,
    list_meals,
)
from nutritrack.application.use_cases.notifications import Notifier
from nutritrack.domain.entities import Meal, MealFood, User
from nutritrack.infrastructure.database import get_db
from nutritrack.interfaces.api.dependencies import get_current_user, get_notifier
from nutritrack.interfaces.api.routes_helpers import bad_request, ensure_applied
from nutritrack.interfaces.api.schemas import (
    MealCreate,
    MealFoodCreate,
    MealFoodRead,
    MealRead,
    MessageResponse,
)

router = APIRouter(prefix="/user/meals", tags=["meals"])
foods_router = APIRouter(prefix="/user/mealfoods", tags=["meals"])

_MEAL_NOT_FOUND = "Meal not found"


def _meal_to_schema(meal: Meal) -> MealRead:
    return MealRead(
        id=meal.id,
        user_id=meal.user_id,
        date=meal.meal_date,
        meal_type=meal.meal_type,
        created_at=meal.created_at,
    )


def _food_to_schema(food: MealFood) -> MealFoodRead:
    return MealFoodRead.model_validate(food, from_attributes=True)


def _foods_or_404(db: Session, meal_id: UUID, user: User) -> list[MealFoodRead]:
    foods = list_meal_foods(db, meal_id, user_id=user.id)
    if foods is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_MEAL_NOT_FOUND)
    return [_food_to_schema(food) for food in foods]


@router.post("", response_model=MealRead, status_code=status.HTTP_201_CREATED)
def create_meal_route(
    payload: MealCreate,
    db: Session = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
    current_user: User = Depends(get_current_user),
) -> MealRead:
    try:
        meal = create_meal(
            db,
            user_id=current_user.id,
            meal_date=payload.date,
            meal_type=payload.meal_type,
            now=notifier.policy.now(),
        )
    except ValueError as exc:
        raise bad_request(exc) from exc
    return _meal_to_schema(meal)


@router.get("", response_model=list[MealRead])
def list_meals_route(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[MealRead]:
    return [_meal_to_schema(meal) for meal in list_meals(db, current_user.id)]


@router.delete("/{meal_id}", response_model=MessageResponse)
def delete_meal_route(
    meal_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    ensure_applied(delete_meal(db, meal_id, user_id=current_user.id), _MEAL_NOT_FOUND)
    return MessageResponse(message="Meal deleted successfully")


@router.get("/{meal_id}/foods", response_model=list[MealFoodRead])
def list_meal_foods_route(
    meal_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[MealFoodRead]:
    return _foods_or_404(db, meal_id, current_user)


@foods_router.post("", response_model=MealFoodRead, status_code=status.HTTP_201_CREATED)
def add_meal_food_route(
    payload: MealFoodCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MealFoodRead:
    values = payload.model_dump(exclude={"meal_id"})
    try:
        food = add_meal_food(
            db, user_id=current_user.id, meal_id=payload.meal_id, values=values
        )
    except ValueError as exc:
        raise bad_request(exc) from exc
    if food is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_MEAL_NOT_FOUND)
    return _food_to_schema(food)


@foods_router.get("/{meal_id}", response_model=list[MealFoodRead])
def list_foods_by_meal_route(
    meal_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[MealFoodRead]:
    return _foods_or_404(db, meal_id, current_user)


@foods_router.delete("/{food_id}", response_model=MessageResponse)
def delete_meal_food_route(
    food_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    ensure_applied(delete_meal_food(db, food_id, user_id=current_user.id), "Food not found")
    return MessageResponse(message="Food deleted successfully")
