"""Batch scans run by the scheduler to emit reminders."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import timedelta
from functools import partial
from typing import TypeVar

from sqlalchemy.orm import Session

from nutritrack.config import Settings
from nutritrack.domain.entities import CooldownKey
from nutritrack.infrastructure.repositories import GoalRepository, WorkoutRepository
from nutritrack.infrastructure.scheduler import DailyJob, IntervalJob, Job

from . import alerts
from .notifier import Notifier

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], Session]
T = TypeVar("T")


def _emit_for_rows(
    session: Session,
    notifier: Notifier,
    rows: Iterable[T],
    build: Callable[[T], tuple[CooldownKey, str]],
    job_name: str,
) -> int:
    sent = 0
    for row in rows:
        try:
            key, message = build(row)
            if notifier.notify_once(session, key, message) is not None:
                sent += 1
        except Exception:
            logger.exception("%s: skipping row %s", job_name, getattr(row, "id", None))
    return sent


def run_tomorrow_workout_reminders(session_factory: SessionFactory, notifier: Notifier) -> int:
    """Remind every user about workouts scheduled for tomorrow."""

    tomorrow = notifier.policy.now().date() + timedelta(days=1)
    with session_factory() as session:
        workouts = WorkoutRepository(session).list_on_date(tomorrow)
        sent = _emit_for_rows(
            session, notifier, workouts, alerts.workout_tomorrow, "tomorrow reminders"
        )
    logger.info(
        "Tomorrow reminders: %s workouts on %s, %s notifications sent",
        len(workouts),
        tomorrow.isoformat(),
        sent,
    )
    return sent


def run_same_day_workout_reminders(session_factory: SessionFactory, notifier: Notifier) -> int:
    """Remind users about workouts starting within the lookahead window today.

    The window is ``(now, now + lookahead]``. When it crosses midnight it is
    cut at the end of the day.
    """

    now = notifier.policy.now()
    today = now.date()
    window_end = now + notifier.policy.same_day_lookahead
    until = window_end.time() if window_end.date() == today else None
    with session_factory() as session:
        workouts = WorkoutRepository(session).list_starting_between(
            today, after=now.time(), until=until
        )
        sent = _emit_for_rows(
            session, notifier, workouts, alerts.workout_same_day, "same-day reminders"
        )
    logger.info(
        "Same-day reminders: %s upcoming workouts, %s notifications sent",
        len(workouts),
        sent,
    )
    return sent


def run_overdue_goal_reminders(session_factory: SessionFactory, notifier: Notifier) -> int:
    """Nudge users about active goals that have not been updated for a while."""

    policy = notifier.policy
    days = max(policy.overdue_after.days, 1)
    updated_before = policy.now() - policy.overdue_after
    with session_factory() as session:
        goals = GoalRepository(session).list_overdue(updated_before=updated_before)
        sent = _emit_for_rows(
            session,
            notifier,
            goals,
            lambda goal: alerts.goal_overdue(goal, days),
            "overdue goal reminders",
        )
    logger.info("Overdue goal reminders: %s goals, %s notifications sent", len(goals), sent)
    return sent


def build_reminder_jobs(
    settings: Settings, session_factory: SessionFactory, notifier: Notifier
) -> list[Job]:
    """Return the background jobs enabled by ``settings``."""

    jobs: list[Job] = [
        DailyJob(
            name="tomorrow-workout-reminders",
            hour=settings.workout_reminder_hour,
            minute=settings.workout_reminder_minute,
            func=partial(run_tomorrow_workout_reminders, session_factory, notifier),
        ),
        IntervalJob(
            name="same-day-workout-reminders",
            interval=timedelta(minutes=settings.same_day_reminder_interval_minutes),
            func=partial(run_same_day_workout_reminders, session_factory, notifier),
        ),
    ]
    if settings.overdue_goal_reminders_enabled:
        jobs.append(
            DailyJob(
                name="overdue-goal-reminders",
                hour=settings.overdue_goal_reminder_hour,
                minute=settings.overdue_goal_reminder_minute,
                func=partial(run_overdue_goal_reminders, session_factory, notifier),
            )
        )
    return jobs


__all__ = [
    "SessionFactory",
    "build_reminder_jobs",
    "run_overdue_goal_reminders",
    "run_same_day_workout_reminders",
    "run_tomorrow_workout_reminders",
]
