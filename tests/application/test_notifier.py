"""Tests for the cooldown check and notification emission."""

from __future__ import annotations

from datetime import timedelta
from uuid import uuid4

import pytest

from nutritrack.application.use_cases.notifications import NotificationStoreError
from nutritrack.domain.entities import AlertKind, CooldownKey
from nutritrack.infrastructure.models import NotificationModel
from nutritrack.infrastructure.repositories import NotificationRepository


def _count(session, user_id) -> int:
    return len(NotificationRepository(session).list_for_user(user_id, limit=50))


def test_recent_until_window_elapses(session, notifier, clock) -> None:
    key = CooldownKey(uuid4(), uuid4(), AlertKind.GOAL_COMPLETED)

    assert notifier.has_recent_notification(session, key) is False
    notifier.create_notification(session, key, "done")
    assert notifier.has_recent_notification(session, key) is True

    clock.advance(hours=24)
    assert notifier.has_recent_notification(session, key) is True

    clock.advance(seconds=1)
    assert notifier.has_recent_notification(session, key) is False


def test_created_notification_is_unread_with_equal_timestamps(session, notifier, clock) -> None:
    key = CooldownKey(uuid4(), None, AlertKind.WORKOUT_SCHEDULED)

    notification = notifier.create_notification(session, key, "hello")

    assert notification.id is not None
    assert notification.is_read is False
    assert notification.created_at == clock.current
    assert notification.updated_at == notification.created_at
    assert (notification.kind, notification.related_id, notification.variant) == (
        AlertKind.WORKOUT_SCHEDULED,
        None,
        None,
    )


def test_key_fields_must_all_match(session, notifier) -> None:
    user_id, goal_id = uuid4(), uuid4()
    notifier.create_notification(
        session, CooldownKey(user_id, goal_id, AlertKind.GOAL_COMPLETED), "done"
    )

    assert not notifier.has_recent_notification(
        session, CooldownKey(user_id, goal_id, AlertKind.GOAL_NEAR_COMPLETION)
    )
    assert not notifier.has_recent_notification(
        session, CooldownKey(user_id, uuid4(), AlertKind.GOAL_COMPLETED)
    )
    assert not notifier.has_recent_notification(
        session, CooldownKey(uuid4(), goal_id, AlertKind.GOAL_COMPLETED)
    )


def test_missing_related_id_matches_missing_related_id(session, notifier) -> None:
    user_id = uuid4()
    key = CooldownKey(user_id, None, AlertKind.WORKOUT_SCHEDULED)

    assert notifier.notify_once(session, key, "Drink some water") is not None
    assert notifier.notify_once(session, key, "Drink some water") is None
    assert _count(session, user_id) == 1


def test_message_text_is_not_part_of_the_key(session, notifier) -> None:
    user_id, goal_id = uuid4(), uuid4()
    key = CooldownKey(user_id, goal_id, AlertKind.GOAL_COMPLETED)

    assert notifier.notify_once(session, key, "first wording") is not None
    assert notifier.notify_once(session, key, "second wording") is None
    assert _count(session, user_id) == 1


def test_variant_distinguishes_alerts(session, notifier) -> None:
    user_id, workout_id = uuid4(), uuid4()
    morning = CooldownKey(user_id, workout_id, AlertKind.WORKOUT_SAME_DAY, "07:00")
    evening = CooldownKey(user_id, workout_id, AlertKind.WORKOUT_SAME_DAY, "19:00")

    assert notifier.notify_once(session, morning, "at 07:00") is not None
    assert notifier.notify_once(session, evening, "at 19:00") is not None
    assert notifier.notify_once(session, morning, "at 07:00") is None


def test_notify_once_fires_again_after_cooldown(session, notifier, clock) -> None:
    key = CooldownKey(uuid4(), uuid4(), AlertKind.WORKOUT_UPDATED)

    assert notifier.notify_once(session, key, "updated") is not None
    clock.advance(hours=23)
    assert notifier.notify_once(session, key, "updated") is None
    clock.advance(hours=2)
    assert notifier.notify_once(session, key, "updated") is not None


def test_cooldown_check_fails_open(session, engine, notifier) -> None:
    NotificationModel.__table__.drop(bind=engine)
    key = CooldownKey(uuid4(), uuid4(), AlertKind.GOAL_COMPLETED)

    assert notifier.has_recent_notification(session, key) is False


def test_store_failure_raises_typed_error(session, engine, notifier) -> None:
    NotificationModel.__table__.drop(bind=engine)
    key = CooldownKey(uuid4(), uuid4(), AlertKind.GOAL_COMPLETED)

    with pytest.raises(NotificationStoreError):
        notifier.create_notification(session, key, "done")


def test_notify_once_swallows_store_failure(session, engine, notifier, caplog) -> None:
    NotificationModel.__table__.drop(bind=engine)
    key = CooldownKey(uuid4(), uuid4(), AlertKind.GOAL_COMPLETED)

    with caplog.at_level("ERROR"):
        assert notifier.notify_once(session, key, "done") is None

    assert any("notification" in record.getMessage().lower() for record in caplog.records)


def test_custom_cooldown_window(session, settings, clock) -> None:
    from nutritrack.application.use_cases.notifications import NotificationPolicy, Notifier

    policy = NotificationPolicy.from_settings(
        settings.model_copy(update={"notification_cooldown_hours": 1}), clock=clock
    )
    short = Notifier(policy)
    key = CooldownKey(uuid4(), None, AlertKind.GOAL_OVERDUE)

    short.create_notification(session, key, "ping")
    clock.advance(minutes=61)

    assert policy.cooldown == timedelta(hours=1)
    assert short.has_recent_notification(session, key) is False
