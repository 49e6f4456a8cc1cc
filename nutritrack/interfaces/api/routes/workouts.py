"""Endpoints for scheduling workouts."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from nutritrack.application.use_cases.notifications import Notifier
from nutritrack.application.use_cases.workouts import (
    create_workout,
    delete_workout,
    list_workouts,
    update_workout,
)
from nutritrack.domain.entities import User, Workout
from nutritrack.infrastructure.database import get_db
from nutritrack.interfaces.api.dependencies import get_current_user, get_notifier
from nutritrack.interfaces.api.routes_helpers import bad_request, ensure_applied
from nutritrack.interfaces.api.schemas import MessageResponse, WorkoutRead, WorkoutWrite

router = APIRouter(prefix="/user/workouts", tags=["workouts"])


def _workout_to_schema(workout: Workout) -> WorkoutRead:
    return WorkoutRead(
        id=workout.id,
        user_id=workout.user_id,
        name=workout.name,
        date=workout.workout_date,
        duration_min=workout.duration_minutes,
        calories_burned=workout.calories_burned or 0,
        start_time=workout.start_time,
        workout_type=workout.workout_type,
        weight=workout.weight,
        reps=workout.reps,
        created_at=workout.created_at,
    )


def _write_kwargs(payload: WorkoutWrite) -> dict:
    return {
        "name": payload.name,
        "workout_date": payload.date,
        "duration_minutes": payload.duration_min,
        "calories_burned": payload.calories_burned,
        "start_time": payload.start_time,
        "workout_type": payload.workout_type,
        "weight": payload.weight,
        "reps": payload.reps,
    }


@router.post("", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def create_workout_route(
    payload: WorkoutWrite,
    db: Session = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
    current_user: User = Depends(get_current_user),
) -> WorkoutRead:
    try:
        workout = create_workout(db, notifier, user_id=current_user.id, **_write_kwargs(payload))
    except ValueError as exc:
        raise bad_request(exc) from exc
    return _workout_to_schema(workout)


@router.get("", response_model=list[WorkoutRead])
def list_workouts_route(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[WorkoutRead]:
    return [_workout_to_schema(workout) for workout in list_workouts(db, current_user.id)]


@router.put("/{workout_id}", response_model=WorkoutRead)
def update_workout_route(
    workout_id: UUID,
    payload: WorkoutWrite,
    db: Session = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
    current_user: User = Depends(get_current_user),
) -> WorkoutRead:
    try:
        workout = update_workout(
            db, notifier, workout_id, user_id=current_user.id, **_write_kwargs(payload)
        )
    except ValueError as exc:
        raise bad_request(exc) from exc
    if workout is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    return _workout_to_schema(workout)


@router.delete("/{workout_id}", response_model=MessageResponse)
def delete_workout_route(
    workout_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    ensure_applied(delete_workout(db, workout_id, user_id=current_user.id), "Workout not found")
    return MessageResponse(message="Workout deleted successfully")
