"""Endpoints for creating, tracking and archiving goals."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from nutritrack.application.use_cases.goals import (
    archive_goal,
    list_goals,
    restore_goal,
    save_goal,
    update_goal,
)
from nutritrack.application.use_cases.notifications import Notifier
from nutritrack.domain.entities import Goal, User
from nutritrack.infrastructure.database import get_db
from nutritrack.interfaces.api.dependencies import get_current_user, get_notifier
from nutritrack.interfaces.api.routes_helpers import bad_request, ensure_applied
from nutritrack.interfaces.api.schemas import GoalRead, GoalSave, GoalUpdate, MessageResponse
from nutritrack.utils import clamp_pagination, parse_bool_filter

router = APIRouter(prefix="/goals", tags=["goals"])


def _goal_to_schema(goal: Goal) -> GoalRead:
    return GoalRead(
        id=goal.id,
        user_id=goal.user_id,
        goal_type=goal.goal_type,
        target_value=goal.target_value,
        progress_value=goal.progress_value,
        time_frame=goal.time_frame,
        is_completed=goal.is_completed,
        archived=goal.archived,
        created_at=goal.created_at,
        updated_at=goal.updated_at,
    )


@router.post("", response_model=GoalRead, status_code=status.HTTP_201_CREATED)
def save_goal_route(
    payload: GoalSave,
    response: Response,
    db: Session = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
    current_user: User = Depends(get_current_user),
) -> GoalRead:
    """Create a goal, or update the existing goal of the same type (200)."""

    try:
        goal, created = save_goal(
            db,
            notifier,
            user_id=current_user.id,
            goal_type=payload.goal_type,
            target_value=payload.target_value,
            time_frame=payload.time_frame,
            progress_value=payload.progress_value,
            is_completed=payload.is_completed,
        )
    except ValueError as exc:
        raise bad_request(exc) from exc
    if not created:
        response.status_code = status.HTTP_200_OK
    return _goal_to_schema(goal)


@router.get("", response_model=list[GoalRead])
def list_goals_route(
    completed: str | None = Query(default=None),
    include_archived: str | None = Query(default=None),
    sort_by: str | None = Query(default=None),
    order: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    offset: str | None = Query(default=None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[GoalRead]:
    goals = list_goals(
        db,
        current_user.id,
        page=clamp_pagination(limit, offset),
        completed=parse_bool_filter(completed),
        include_archived=parse_bool_filter(include_archived) is True,
        sort_by=sort_by,
        order=order,
    )
    return [_goal_to_schema(goal) for goal in goals]


@router.put("/{goal_id}", response_model=GoalRead)
def update_goal_route(
    goal_id: UUID,
    payload: GoalUpdate,
    db: Session = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
    current_user: User = Depends(get_current_user),
) -> GoalRead:
    try:
        goal = update_goal(
            db,
            notifier,
            goal_id,
            user_id=current_user.id,
            target_value=payload.target_value,
            time_frame=payload.time_frame,
            progress_value=payload.progress_value,
            is_completed=payload.is_completed,
        )
    except ValueError as exc:
        raise bad_request(exc) from exc
    if goal is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Goal not found")
    return _goal_to_schema(goal)


@router.delete("/{goal_id}", response_model=MessageResponse)
def archive_goal_route(
    goal_id: UUID,
    db: Session = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    result = archive_goal(db, goal_id, user_id=current_user.id, now=notifier.policy.now())
    ensure_applied(result, "Goal not found or already archived")
    return MessageResponse(message="Goal archived successfully")


@router.put("/{goal_id}/restore", response_model=MessageResponse)
def restore_goal_route(
    goal_id: UUID,
    db: Session = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    result = restore_goal(db, goal_id, user_id=current_user.id, now=notifier.policy.now())
    ensure_applied(result, "Goal not found or not archived")
    return MessageResponse(message="Goal restored successfully")
