"""Repository implementations for infrastructure layer."""

from .goal_repository import SORTABLE_COLUMNS, GoalRepository
from .meal_repository import MealRepository
from .notification_repository import NotificationRepository
from .password_reset_repository import PasswordResetRepository
from .user_repository import UserRepository
from .workout_repository import WorkoutRepository

__all__ = [
    "GoalRepository",
    "MealRepository",
    "NotificationRepository",
    "PasswordResetRepository",
    "UserRepository",
    "SORTABLE_COLUMNS",
    "WorkoutRepository",
]
