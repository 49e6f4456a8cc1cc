"""Validation helpers for goal use cases."""

import re

from nutritrack.domain.entities import MAX_GOAL_VALUE, TIME_FRAMES

MIN_GOAL_TYPE_LENGTH = 3
MAX_GOAL_TYPE_LENGTH = 50
_GOAL_TYPE_PATTERN = re.compile(r"^[a-z0-9 _-]+$")


def normalize_goal_type(goal_type: str) -> str:
    """Return the trimmed, lower-cased goal type or raise ``ValueError``."""

    normalized = (goal_type or "").strip().lower()
    if (
        not MIN_GOAL_TYPE_LENGTH <= len(normalized) <= MAX_GOAL_TYPE_LENGTH
        or not _GOAL_TYPE_PATTERN.match(normalized)
    ):
        raise ValueError(
            f"goal_type must be {MIN_GOAL_TYPE_LENGTH}-{MAX_GOAL_TYPE_LENGTH} chars and only "
            "letters, numbers, spaces, underscores, or hyphens allowed"
        )
    return normalized


def validate_goal_values(target_value: int, progress_value: int | None) -> int:
    """Check the numeric bounds and return the effective progress value."""

    if not 1 <= target_value <= MAX_GOAL_VALUE:
        raise ValueError(f"target_value must be between 1 and {MAX_GOAL_VALUE}")
    if progress_value is None:
        return 0
    if not 0 <= progress_value <= MAX_GOAL_VALUE:
        raise ValueError(f"progress_value must be between 0 and {MAX_GOAL_VALUE}")
    return progress_value


def validate_time_frame(time_frame: str) -> str:
    if time_frame not in TIME_FRAMES:
        raise ValueError("time_frame must be daily, weekly, or monthly")
    return time_frame
