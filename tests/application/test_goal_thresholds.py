"""Goal alerts raised when goals are saved."""

from __future__ import annotations

import threading

import pytest

from nutritrack.application.use_cases.goals import save_goal, update_goal
from nutritrack.application.use_cases.notifications import evaluate_goal_thresholds
from nutritrack.domain.entities import AlertKind
from nutritrack.infrastructure.repositories import NotificationRepository


def _kinds(session, user_id) -> list[AlertKind]:
    notifications = NotificationRepository(session).list_for_user(user_id, limit=50)
    return sorted((n.kind for n in notifications), key=lambda kind: kind.value)


def _save(session, notifier, user_id, **overrides):
    values = {
        "goal_type": "Steps",
        "target_value": 10,
        "time_frame": "daily",
        "progress_value": 0,
    }
    values.update(overrides)
    return save_goal(session, notifier, user_id=user_id, **values)


def test_progress_reaching_target_forces_completion(session, notifier, make_user) -> None:
    user_id = make_user()

    goal, created = _save(session, notifier, user_id, progress_value=12, is_completed=False)

    assert created is True
    assert goal.is_completed is True
    assert goal.goal_type == "steps"
    assert _kinds(session, user_id) == [AlertKind.GOAL_COMPLETED]


def test_low_progress_emits_nothing(session, notifier, make_user) -> None:
    user_id = make_user()

    goal, _ = _save(session, notifier, user_id, progress_value=7)

    assert goal.is_completed is False
    assert _kinds(session, user_id) == []


def test_exact_eighty_percent_fires_once(session, notifier, make_user) -> None:
    user_id = make_user()

    _save(session, notifier, user_id, progress_value=8)
    _save(session, notifier, user_id, progress_value=8)

    assert _kinds(session, user_id) == [AlertKind.GOAL_NEAR_COMPLETION]


def test_near_completion_then_completion_scenario(session, notifier, make_user) -> None:
    user_id = make_user()
    goal, _ = _save(session, notifier, user_id, progress_value=0)
    assert _kinds(session, user_id) == []

    update_goal(
        session,
        notifier,
        goal.id,
        user_id=user_id,
        target_value=10,
        time_frame="daily",
        progress_value=8,
    )
    assert _kinds(session, user_id) == [AlertKind.GOAL_NEAR_COMPLETION]

    updated = update_goal(
        session,
        notifier,
        goal.id,
        user_id=user_id,
        target_value=10,
        time_frame="daily",
        progress_value=10,
    )
    assert updated.is_completed is True
    assert _kinds(session, user_id) == [
        AlertKind.GOAL_COMPLETED,
        AlertKind.GOAL_NEAR_COMPLETION,
    ]


def test_jump_to_completion_skips_near_completion(session, notifier, make_user) -> None:
    user_id = make_user()

    _save(session, notifier, user_id, progress_value=2)
    _save(session, notifier, user_id, progress_value=10)

    assert _kinds(session, user_id) == [AlertKind.GOAL_COMPLETED]


def test_explicit_flag_completes_goal(session, notifier, make_user) -> None:
    user_id = make_user()

    goal, _ = _save(session, notifier, user_id, progress_value=1, is_completed=True)

    assert goal.is_completed is True
    notification = NotificationRepository(session).list_for_user(user_id)[0]
    assert notification.message == "🎯 Congratulations! Your goal 'steps' is completed."
    assert notification.related_id == goal.id


def test_renaming_goal_type_keeps_cooldown(session, notifier, make_user) -> None:
    """The alert identity is the goal, not the message text."""

    user_id = make_user()
    goal, _ = _save(session, notifier, user_id, progress_value=10)
    goal.goal_type = "daily steps"

    assert evaluate_goal_thresholds(session, notifier, goal) is None
    assert _kinds(session, user_id) == [AlertKind.GOAL_COMPLETED]


def test_repeat_allowed_after_cooldown(session, notifier, clock, make_user) -> None:
    user_id = make_user()
    _save(session, notifier, user_id, progress_value=8)

    clock.advance(hours=25)
    _save(session, notifier, user_id, progress_value=9)

    assert _kinds(session, user_id) == [
        AlertKind.GOAL_NEAR_COMPLETION,
        AlertKind.GOAL_NEAR_COMPLETION,
    ]


def test_update_of_missing_goal_returns_none(session, notifier, make_user) -> None:
    from uuid import uuid4

    user_id = make_user()

    assert (
        update_goal(
            session, notifier, uuid4(), user_id=user_id, target_value=10, time_frame="daily"
        )
        is None
    )


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"goal_type": "ab"}, "goal_type"),
        ({"goal_type": "Steps!"}, "goal_type"),
        ({"target_value": 0}, "target_value"),
        ({"target_value": 1_000_001}, "target_value"),
        ({"progress_value": -1}, "progress_value"),
        ({"time_frame": "yearly"}, "time_frame"),
    ],
)
def test_invalid_goals_are_rejected(session, notifier, make_user, overrides, message) -> None:
    user_id = make_user()

    with pytest.raises(ValueError, match=message):
        _save(session, notifier, user_id, **overrides)
    assert _kinds(session, user_id) == []


def test_concurrent_completion_emits_at_least_once(
    session_factory, notifier, make_user
) -> None:
    user_id = make_user()
    with session_factory() as db:
        goal, _ = _save(db, notifier, user_id, progress_value=5)
    goal.progress_value = goal.target_value
    goal.is_completed = True

    barrier = threading.Barrier(4)
    errors: list[BaseException] = []

    def _evaluate() -> None:
        try:
            barrier.wait()
            with session_factory() as db:
                evaluate_goal_thresholds(db, notifier, goal)
        except BaseException as exc:  # pragma: no cover - surfaced by the assertion below
            errors.append(exc)

    threads = [threading.Thread(target=_evaluate) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    with session_factory() as db:
        kinds = _kinds(db, user_id)
    assert kinds.count(AlertKind.GOAL_COMPLETED) >= 1
    assert AlertKind.GOAL_NEAR_COMPLETION not in kinds
