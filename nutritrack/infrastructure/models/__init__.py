"""ORM models used by the application infrastructure."""

from .goal import GoalModel
from .meal import MealFoodModel, MealModel
from .notification import NotificationModel
from .password_reset import PasswordResetModel
from .user import UserModel
from .workout import WorkoutModel

__all__ = [
    "GoalModel",
    "MealFoodModel",
    "MealModel",
    "NotificationModel",
    "PasswordResetModel",
    "UserModel",
    "WorkoutModel",
]
