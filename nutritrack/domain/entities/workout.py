"""Domain entity representing a scheduled workout."""

from dataclasses import dataclass
from datetime import date, datetime, time
from uuid import UUID


@dataclass
class Workout:
    """A training session planned for a given day and optional start time."""

    id: UUID | None
    user_id: UUID
    name: str
    workout_date: date
    duration_minutes: int = 0
    calories_burned: int | None = None
    workout_type: str | None = None
    weight: float | None = None
    reps: int | None = None
    start_time: time | None = None
    created_at: datetime | None = None


__all__ = ["Workout"]
