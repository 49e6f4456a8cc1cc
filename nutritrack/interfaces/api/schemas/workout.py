"""Schemas for workout payloads."""

from datetime import date, datetime, time
from uuid import UUID

from pydantic import BaseModel, Field, field_serializer


class WorkoutWrite(BaseModel):
    name: str
    date: str = Field(..., description="Scheduled day in YYYY-MM-DD format")
    duration_min: int = 0
    calories_burned: int = 0
    start_time: str | None = Field(default=None, description="Optional HH:MM start time")
    workout_type: str | None = None
    weight: float | None = None
    reps: int | None = None


class WorkoutRead(BaseModel):
    id: UUID
    user_id: UUID
    name: str
    date: date
    duration_min: int
    calories_burned: int
    start_time: time | None = None
    workout_type: str | None = None
    weight: float | None = None
    reps: int | None = None
    created_at: datetime | None = None

    @field_serializer("start_time")
    def _serialize_start_time(self, value: time | None) -> str | None:
        return value.strftime("%H:%M") if value else None


__all__ = ["WorkoutRead", "WorkoutWrite"]
