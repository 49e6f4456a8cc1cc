"""Domain entities exposed by the application."""

from .goal import MAX_GOAL_VALUE, TIME_FRAMES, Goal
from .meal import DEFAULT_FOOD_UNIT, DEFAULT_SERVING_SIZE, Meal, MealFood
from .mutation import MutationResult
from .notification import AlertKind, CooldownKey, Notification
from .nutrition import NutritionFacts
from .password_reset import PasswordReset
from .user import DEFAULT_ROLE, User
from .workout import Workout

__all__ = [
    "AlertKind",
    "CooldownKey",
    "DEFAULT_FOOD_UNIT",
    "DEFAULT_ROLE",
    "DEFAULT_SERVING_SIZE",
    "Goal",
    "MAX_GOAL_VALUE",
    "Meal",
    "MealFood",
    "MutationResult",
    "Notification",
    "NutritionFacts",
    "PasswordReset",
    "TIME_FRAMES",
    "User",
    "Workout",
]
