"""Use cases for managing workouts."""

from .manage_workouts import delete_workout, list_workouts
from .save_workout import create_workout, update_workout

__all__ = ["create_workout", "delete_workout", "list_workouts", "update_workout"]
