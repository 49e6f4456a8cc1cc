from .auth import (
    LoginRequest,
    PasswordResetConfirm,
    PasswordResetRequest,
    PasswordResetRequestResponse,
    RegisterRequest,
    Token,
)
from .common import MessageResponse
from .goal import GoalRead, GoalSave, GoalUpdate
from .meal import MealCreate, MealFoodCreate, MealFoodFields, MealFoodRead, MealRead
from .notification import NotificationRead, NotificationsCleared, NotificationsMarkedRead
from .nutrition import NutritionFactsRead, NutritionQuery
from .user import ProfileRead, ProfileUpdate
from .workout import WorkoutRead, WorkoutWrite

__all__ = [
    "GoalRead",
    "GoalSave",
    "GoalUpdate",
    "LoginRequest",
    "MealCreate",
    "MealFoodCreate",
    "MealFoodFields",
    "MealFoodRead",
    "MealRead",
    "MessageResponse",
    "NotificationRead",
    "NotificationsCleared",
    "NotificationsMarkedRead",
    "NutritionFactsRead",
    "NutritionQuery",
    "PasswordResetConfirm",
    "PasswordResetRequest",
    "PasswordResetRequestResponse",
    "ProfileRead",
    "ProfileUpdate",
    "RegisterRequest",
    "Token",
    "WorkoutRead",
    "WorkoutWrite",
]
