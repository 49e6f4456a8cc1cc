"""Use cases for creating and updating goals."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.orm import Session

from nutritrack.application.use_cases.notifications import (
    Notifier,
    evaluate_goal_thresholds,
)
from nutritrack.domain.entities import Goal
from nutritrack.infrastructure.repositories import GoalRepository

from .validators import normalize_goal_type, validate_goal_values, validate_time_frame


def save_goal(
    session: Session,
    notifier: Notifier,
    *,
    user_id: UUID,
    goal_type: str,
    target_value: int,
    time_frame: str,
    progress_value: int | None = None,
    is_completed: bool | None = None,
) -> tuple[Goal, bool]:
    """Create the goal or update the user's existing goal of the same type.

    Returns the stored goal and whether it was newly created. Updating an
    archived goal restores it.
    """

    goal_type = normalize_goal_type(goal_type)
    progress = validate_goal_values(target_value, progress_value)
    time_frame = validate_time_frame(time_frame)
    completed = bool(is_completed) or progress >= target_value

    repository = GoalRepository(session)
    now = notifier.policy.now()
    existing = repository.get_by_type(user_id, goal_type)

    if existing is None:
        goal = repository.create(
            Goal(
                id=None,
                user_id=user_id,
                goal_type=goal_type,
                target_value=target_value,
                progress_value=progress,
                time_frame=time_frame,
                is_completed=completed,
                archived=False,
                created_at=now,
                updated_at=now,
            )
        )
        created = True
    else:
        existing.target_value = target_value
        existing.progress_value = progress
        existing.time_frame = time_frame
        existing.is_completed = completed
        existing.archived = False
        existing.updated_at = now
        goal = repository.update(existing) or existing
        created = False

    evaluate_goal_thresholds(session, notifier, goal)
    return goal, created


def update_goal(
    session: Session,
    notifier: Notifier,
    goal_id: UUID,
    *,
    user_id: UUID,
    target_value: int,
    time_frame: str,
    progress_value: int | None = None,
    is_completed: bool | None = None,
) -> Goal | None:
    """Update a goal owned by ``user_id``; return ``None`` when it does not exist."""

    progress = validate_goal_values(target_value, progress_value)
    time_frame = validate_time_frame(time_frame)

    repository = GoalRepository(session)
    goal = repository.get(goal_id, user_id=user_id)
    if goal is None:
        return None

    goal.target_value = target_value
    goal.progress_value = progress
    goal.time_frame = time_frame
    goal.is_completed = bool(is_completed) or progress >= target_value
    goal.updated_at = notifier.policy.now()
    updated = repository.update(goal)
    if updated is None:
        return None

    evaluate_goal_thresholds(session, notifier, updated)
    return updated
