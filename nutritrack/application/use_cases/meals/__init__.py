"""Use cases for meals and meal foods."""

from .meals import (
    add_meal_food,
    create_meal,
    delete_meal,
    delete_meal_food,
    list_meal_foods,
    list_meals,
    parse_meal_date,
)

__all__ = [
    "add_meal_food",
    "create_meal",
    "delete_meal",
    "delete_meal_food",
    "list_meal_foods",
    "list_meals",
    "parse_meal_date",
]
