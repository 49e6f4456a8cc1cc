"""Domain entities for user notifications and their de-duplication key."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class AlertKind(str, Enum):
    """Category of an alert, part of the cooldown identity."""

    GOAL_COMPLETED = "goal_completed"
    GOAL_NEAR_COMPLETION = "goal_near_completion"
    GOAL_OVERDUE = "goal_overdue"
    WORKOUT_SCHEDULED = "workout_scheduled"
    WORKOUT_UPDATED = "workout_updated"
    WORKOUT_TOMORROW = "workout_tomorrow"
    WORKOUT_SAME_DAY = "workout_same_day"


@dataclass(frozen=True)
class CooldownKey:
    """Identity of an alert for de-duplication purposes.

    Two notifications with equal keys created within the cooldown window are
    the same alert. ``related_id`` and ``variant`` compare by value, so
    ``None`` matches ``None``.
    """

    user_id: UUID
    related_id: UUID | None
    kind: AlertKind
    variant: str | None = None


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: UUID | None
    user_id: UUID
    message: str
    kind: AlertKind
    related_id: UUID | None = None
    variant: str | None = None
    is_read: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["AlertKind", "CooldownKey", "Notification"]
