"""Use cases for reading and tidying a user's notifications."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from uuid import UUID

from sqlalchemy.orm import Session

from nutritrack.domain.entities import MutationResult, Notification
from nutritrack.infrastructure.repositories import NotificationRepository
from nutritrack.utils import Page


def list_notifications(
    session: Session,
    user_id: UUID,
    *,
    page: Page,
    is_read: bool | None = None,
) -> Sequence[Notification]:
    """Return the user's notifications, newest first."""

    return NotificationRepository(session).list_for_user(
        user_id, is_read=is_read, limit=page.limit, offset=page.offset
    )


def mark_notification_read(
    session: Session, notification_id: UUID, *, user_id: UUID, now: datetime
) -> MutationResult:
    """Mark one unread notification as read.

    Missing, foreign and already-read notifications all yield ``NOOP``.
    """

    affected = NotificationRepository(session).mark_as_read(
        notification_id, user_id=user_id, now=now
    )
    return MutationResult.APPLIED if affected else MutationResult.NOOP


def mark_all_notifications_read(session: Session, user_id: UUID, *, now: datetime) -> int:
    return NotificationRepository(session).mark_all_as_read(user_id, now=now)


def delete_notification(
    session: Session, notification_id: UUID, *, user_id: UUID
) -> MutationResult:
    affected = NotificationRepository(session).delete(notification_id, user_id=user_id)
    return MutationResult.APPLIED if affected else MutationResult.NOOP


def clear_notifications(session: Session, user_id: UUID) -> int:
    return NotificationRepository(session).delete_all(user_id)


__all__ = [
    "clear_notifications",
    "delete_notification",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
]
