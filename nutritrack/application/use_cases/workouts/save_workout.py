"""Use cases for scheduling and editing workouts."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.orm import Session

from nutritrack.application.use_cases.notifications import Notifier, notify_workout_saved
from nutritrack.domain.entities import Workout
from nutritrack.infrastructure.repositories import WorkoutRepository

from .validators import parse_start_time, parse_workout_date, validate_workout_fields


def create_workout(
    session: Session,
    notifier: Notifier,
    *,
    user_id: UUID,
    name: str,
    workout_date: str,
    duration_minutes: int = 0,
    calories_burned: int = 0,
    start_time: str | None = None,
    workout_type: str | None = None,
    weight: float | None = None,
    reps: int | None = None,
) -> Workout:
    """Store a new workout and announce it to its owner."""

    name = validate_workout_fields(name, duration_minutes, calories_burned)
    workout = Workout(
        id=None,
        user_id=user_id,
        name=name,
        workout_date=parse_workout_date(workout_date),
        duration_minutes=duration_minutes,
        calories_burned=calories_burned,
        workout_type=workout_type,
        weight=weight,
        reps=reps,
        start_time=parse_start_time(start_time),
        created_at=notifier.policy.now(),
    )
    saved = WorkoutRepository(session).create(workout)
    notify_workout_saved(session, notifier, saved, created=True)
    return saved


def update_workout(
    session: Session,
    notifier: Notifier,
    workout_id: UUID,
    *,
    user_id: UUID,
    name: str,
    workout_date: str,
    duration_minutes: int = 0,
    calories_burned: int = 0,
    start_time: str | None = None,
    workout_type: str | None = None,
    weight: float | None = None,
    reps: int | None = None,
) -> Workout | None:
    """Replace the workout's fields; return ``None`` when the user has no such workout."""

    name = validate_workout_fields(name, duration_minutes, calories_burned)
    day = parse_workout_date(workout_date)
    starts = parse_start_time(start_time)

    repository = WorkoutRepository(session)
    workout = repository.get(workout_id, user_id=user_id)
    if workout is None:
        return None

    workout.name = name
    workout.workout_date = day
    workout.start_time = starts
    workout.duration_minutes = duration_minutes
    workout.calories_burned = calories_burned
    workout.workout_type = workout_type
    workout.weight = weight
    workout.reps = reps
    updated = repository.update(workout)
    if updated is None:
        return None

    notify_workout_saved(session, notifier, updated, created=False)
    return updated
