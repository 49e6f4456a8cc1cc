"""Cooldown-aware notification emission."""

from __future__ import annotations

import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from nutritrack.domain.entities import CooldownKey, Notification
from nutritrack.infrastructure.repositories import NotificationRepository

from .policy import NotificationPolicy

logger = logging.getLogger(__name__)


class NotificationStoreError(RuntimeError):
    """Raised when a notification cannot be persisted."""


class Notifier:
    """Emit notifications unless an identical alert was sent recently.

    Check and insert are not atomic: two concurrent triggers for the same key
    may both pass the check, so delivery is at-least-once.
    """

    def __init__(self, policy: NotificationPolicy) -> None:
        self.policy = policy

    def has_recent_notification(self, session: Session, key: CooldownKey) -> bool:
        """Return ``True`` when ``key`` fired within the cooldown window.

        A failing store is treated as "nothing recent" so alerts are not lost.
        """

        since = self.policy.now() - self.policy.cooldown
        try:
            return NotificationRepository(session).exists_since(key, since)
        except SQLAlchemyError:
            logger.exception(
                "Cooldown check failed for user %s (%s); assuming no recent alert",
                key.user_id,
                key.kind.value,
            )
            session.rollback()
            return False

    def create_notification(
        self, session: Session, key: CooldownKey, message: str
    ) -> Notification:
        now = self.policy.now()
        notification = Notification(
            id=None,
            user_id=key.user_id,
            related_id=key.related_id,
            kind=key.kind,
            variant=key.variant,
            message=message,
            is_read=False,
            created_at=now,
            updated_at=now,
        )
        try:
            return NotificationRepository(session).create(notification)
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error(
                "Failed to store notification for user %s (%s): %s",
                key.user_id,
                key.kind.value,
                exc,
            )
            raise NotificationStoreError("Failed to store notification") from exc

    def notify_once(
        self, session: Session, key: CooldownKey, message: str
    ) -> Notification | None:
        """Create the notification unless it is still cooling down.

        Never raises: storage failures are logged and ``None`` is returned.
        """

        if self.has_recent_notification(session, key):
            logger.debug("Suppressed %s alert for user %s", key.kind.value, key.user_id)
            return None
        try:
            return self.create_notification(session, key, message)
        except NotificationStoreError:
            return None


__all__ = ["NotificationStoreError", "Notifier"]
