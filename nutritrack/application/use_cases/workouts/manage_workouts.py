"""Use cases for listing and removing workouts."""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy.orm import Session

from nutritrack.domain.entities import MutationResult, Workout
from nutritrack.infrastructure.repositories import WorkoutRepository


def list_workouts(session: Session, user_id: UUID) -> Sequence[Workout]:
    return WorkoutRepository(session).list_for_user(user_id)


def delete_workout(session: Session, workout_id: UUID, *, user_id: UUID) -> MutationResult:
    affected = WorkoutRepository(session).delete(workout_id, user_id=user_id)
    return MutationResult.APPLIED if affected else MutationResult.NOOP
