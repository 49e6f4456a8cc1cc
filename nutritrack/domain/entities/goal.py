"""Domain entity representing a user goal."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

TIME_FRAMES = ("daily", "weekly", "monthly")
MAX_GOAL_VALUE = 1_000_000


@dataclass
class Goal:
    """Numeric target a user tracks progress against."""

    id: UUID | None
    user_id: UUID
    goal_type: str
    target_value: int
    progress_value: int
    time_frame: str
    is_completed: bool = False
    archived: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["Goal", "MAX_GOAL_VALUE", "TIME_FRAMES"]
