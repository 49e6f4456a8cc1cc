"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from nutritrack.domain.entities import AlertKind, CooldownKey, Notification
from nutritrack.infrastructure.models import NotificationModel


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def exists_since(self, key: CooldownKey, since: datetime) -> bool:
        """Return ``True`` when a notification matching ``key`` was created at or after ``since``."""

        # ``== None`` compiles to ``IS NULL`` so absent related ids match each other.
        query = (
            select(NotificationModel.id)
            .where(NotificationModel.user_id == key.user_id)
            .where(NotificationModel.related_id == key.related_id)
            .where(NotificationModel.kind == key.kind.value)
            .where(NotificationModel.variant == key.variant)
            .where(NotificationModel.created_at >= since)
            .limit(1)
        )
        return self.session.execute(query).first() is not None

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            user_id=notification.user_id,
            related_id=notification.related_id,
            kind=notification.kind.value,
            variant=notification.variant,
            message=notification.message,
            is_read=notification.is_read,
            created_at=notification.created_at,
            updated_at=notification.updated_at or notification.created_at,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_for_user(
        self,
        user_id: UUID,
        *,
        is_read: bool | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.user_id == user_id
        )
        if is_read is not None:
            query = query.filter(NotificationModel.is_read.is_(is_read))
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        query = query.offset(offset).limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def mark_as_read(self, notification_id: UUID, *, user_id: UUID, now: datetime) -> int:
        """Flip a single unread notification owned by ``user_id``; return affected rows."""

        affected = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id == notification_id,
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
            )
            .update(
                {NotificationModel.is_read: True, NotificationModel.updated_at: now},
                synchronize_session=False,
            )
        )
        self.session.commit()
        return affected

    def mark_all_as_read(self, user_id: UUID, *, now: datetime) -> int:
        affected = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
            )
            .update(
                {NotificationModel.is_read: True, NotificationModel.updated_at: now},
                synchronize_session=False,
            )
        )
        self.session.commit()
        return affected

    def delete(self, notification_id: UUID, *, user_id: UUID) -> int:
        affected = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id == notification_id,
                NotificationModel.user_id == user_id,
            )
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return affected

    def delete_all(self, user_id: UUID) -> int:
        affected = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return affected

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            related_id=model.related_id,
            kind=AlertKind(model.kind),
            variant=model.variant,
            message=model.message,
            is_read=model.is_read,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["NotificationRepository"]
