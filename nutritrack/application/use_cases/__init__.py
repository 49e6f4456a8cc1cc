"""Aggregate application use cases."""

from .notifications import Notifier, NotificationPolicy, notify_workout_saved
from .users import authenticate_user, register_user

__all__ = [
    "NotificationPolicy",
    "Notifier",
    "authenticate_user",
    "notify_workout_saved",
    "register_user",
]
