"""Decide which alerts a goal or workout change should raise."""

from __future__ import annotations

from sqlalchemy.orm import Session

from nutritrack.domain.entities import Goal, Notification, Workout

from . import alerts
from .notifier import Notifier


def is_goal_completed(goal: Goal) -> bool:
    return goal.is_completed or goal.progress_value >= goal.target_value


def evaluate_goal_thresholds(
    session: Session, notifier: Notifier, goal: Goal
) -> Notification | None:
    """Emit the completion or near-completion alert for ``goal``.

    The two alerts are exclusive: a goal that jumps straight past its target
    only gets the completion message.
    """

    if is_goal_completed(goal):
        key, message = alerts.goal_completed(goal)
        return notifier.notify_once(session, key, message)

    threshold = notifier.policy.near_completion_ratio * goal.target_value
    if goal.progress_value >= threshold:
        key, message = alerts.goal_near_completion(goal)
        return notifier.notify_once(session, key, message)
    return None


def notify_workout_saved(
    session: Session, notifier: Notifier, workout: Workout, *, created: bool
) -> Notification | None:
    if created:
        key, message = alerts.workout_scheduled(workout)
    else:
        key, message = alerts.workout_updated(workout)
    return notifier.notify_once(session, key, message)


__all__ = ["evaluate_goal_thresholds", "is_goal_completed", "notify_workout_saved"]
