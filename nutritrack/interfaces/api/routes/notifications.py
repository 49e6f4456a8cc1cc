"""Endpoints for the authenticated user's notification inbox."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from nutritrack.application.use_cases.notifications import (
    Notifier,
    clear_notifications,
    delete_notification,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from nutritrack.domain.entities import Notification, User
from nutritrack.infrastructure.database import get_db
from nutritrack.interfaces.api.dependencies import get_current_user, get_notifier
from nutritrack.interfaces.api.routes_helpers import ensure_applied
from nutritrack.interfaces.api.schemas import (
    MessageResponse,
    NotificationRead,
    NotificationsCleared,
    NotificationsMarkedRead,
)
from nutritrack.utils import clamp_pagination, parse_bool_filter

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id,
        user_id=notification.user_id,
        related_id=notification.related_id,
        kind=notification.kind.value,
        message=notification.message,
        is_read=notification.is_read,
        created_at=notification.created_at,
        updated_at=notification.updated_at or notification.created_at,
    )


@router.get("", response_model=list[NotificationRead])
def list_notifications_route(
    is_read: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    offset: str | None = Query(default=None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[NotificationRead]:
    """Return the user's notifications, newest first."""

    notifications = list_notifications(
        db,
        current_user.id,
        page=clamp_pagination(limit, offset),
        is_read=parse_bool_filter(is_read),
    )
    return [_notification_to_schema(notification) for notification in notifications]


@router.put("/read-all", response_model=NotificationsMarkedRead)
def mark_all_read_route(
    db: Session = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
    current_user: User = Depends(get_current_user),
) -> NotificationsMarkedRead:
    count = mark_all_notifications_read(db, current_user.id, now=notifier.policy.now())
    return NotificationsMarkedRead(
        message="All notifications marked as read", updated_notifications=count
    )


@router.put("/{notification_id}/read", response_model=MessageResponse)
def mark_read_route(
    notification_id: UUID,
    db: Session = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    result = mark_notification_read(
        db, notification_id, user_id=current_user.id, now=notifier.policy.now()
    )
    ensure_applied(result, "Notification not found or already read")
    return MessageResponse(message="Notification marked as read")


@router.delete("/clear-all", response_model=NotificationsCleared)
def clear_all_route(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NotificationsCleared:
    count = clear_notifications(db, current_user.id)
    return NotificationsCleared(
        message="All notifications cleared", deleted_notifications=count
    )


@router.delete("/{notification_id}", response_model=MessageResponse)
def delete_notification_route(
    notification_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    result = delete_notification(db, notification_id, user_id=current_user.id)
    ensure_applied(result, "Notification not found")
    return MessageResponse(message="Notification deleted successfully")
