"""Use cases for managing goals."""

from .manage_goals import archive_goal, list_goals, restore_goal
from .save_goal import save_goal, update_goal
from .validators import normalize_goal_type, validate_goal_values

__all__ = [
    "archive_goal",
    "list_goals",
    "normalize_goal_type",
    "restore_goal",
    "save_goal",
    "update_goal",
    "validate_goal_values",
]
