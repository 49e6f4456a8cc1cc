"""Schemas for goal payloads."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class GoalUpdate(BaseModel):
    target_value: int
    time_frame: str
    progress_value: int | None = None
    is_completed: bool | None = None


class GoalSave(GoalUpdate):
    goal_type: str


class GoalRead(BaseModel):
    id: UUID
    user_id: UUID
    goal_type: str
    target_value: int
    progress_value: int
    time_frame: str
    is_completed: bool
    archived: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["GoalRead", "GoalSave", "GoalUpdate"]
