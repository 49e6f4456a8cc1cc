"""Pydantic models describing notification payloads."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: UUID
    user_id: UUID
    related_id: UUID | None = None
    kind: str
    message: str
    is_read: bool
    created_at: datetime
    updated_at: datetime


class NotificationsMarkedRead(BaseModel):
    message: str
    updated_notifications: int


class NotificationsCleared(BaseModel):
    message: str
    deleted_notifications: int


__all__ = ["NotificationRead", "NotificationsCleared", "NotificationsMarkedRead"]
