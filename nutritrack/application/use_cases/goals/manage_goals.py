"""Use cases for listing, archiving and restoring goals."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from uuid import UUID

from sqlalchemy.orm import Session

from nutritrack.domain.entities import Goal, MutationResult
from nutritrack.infrastructure.repositories import SORTABLE_COLUMNS, GoalRepository
from nutritrack.utils import Page

DEFAULT_SORT = "created_at"


def list_goals(
    session: Session,
    user_id: UUID,
    *,
    page: Page,
    completed: bool | None = None,
    include_archived: bool = False,
    sort_by: str | None = None,
    order: str | None = None,
) -> Sequence[Goal]:
    """List goals; unknown sort columns and orders fall back to ``created_at desc``."""

    if sort_by not in SORTABLE_COLUMNS:
        sort_by = DEFAULT_SORT
    descending = (order or "desc").lower() != "asc"
    return GoalRepository(session).list_for_user(
        user_id,
        completed=completed,
        include_archived=include_archived,
        sort_by=sort_by,
        descending=descending,
        limit=page.limit,
        offset=page.offset,
    )


def archive_goal(
    session: Session, goal_id: UUID, *, user_id: UUID, now: datetime
) -> MutationResult:
    affected = GoalRepository(session).set_archived(
        goal_id, user_id=user_id, archived=True, now=now
    )
    return MutationResult.APPLIED if affected else MutationResult.NOOP


def restore_goal(
    session: Session, goal_id: UUID, *, user_id: UUID, now: datetime
) -> MutationResult:
    affected = GoalRepository(session).set_archived(
        goal_id, user_id=user_id, archived=False, now=now
    )
    return MutationResult.APPLIED if affected else MutationResult.NOOP
