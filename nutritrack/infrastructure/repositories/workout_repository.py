"""Persistence layer for workouts."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, time
from uuid import UUID

from sqlalchemy.orm import Session

from nutritrack.domain.entities import Workout
from nutritrack.infrastructure.models import WorkoutModel


class WorkoutRepository:
    """Provide CRUD operations and reminder queries for workouts."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, workout_id: UUID, *, user_id: UUID | None = None) -> Workout | None:
        model = self._get_model(workout_id, user_id=user_id)
        return self._to_entity(model) if model else None

    def list_for_user(self, user_id: UUID) -> Sequence[Workout]:
        query = (
            self.session.query(WorkoutModel)
            .filter(WorkoutModel.user_id == user_id)
            .order_by(WorkoutModel.workout_date.desc(), WorkoutModel.created_at.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, workout: Workout) -> Workout:
        model = WorkoutModel(created_at=workout.created_at)
        self._apply_entity_to_model(model, workout)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, workout: Workout) -> Workout | None:
        if workout.id is None:
            raise ValueError("Workout id is required for updates")
        model = self._get_model(workout.id, user_id=workout.user_id)
        if model is None:
            return None
        self._apply_entity_to_model(model, workout)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, workout_id: UUID, *, user_id: UUID) -> int:
        affected = (
            self.session.query(WorkoutModel)
            .filter(WorkoutModel.id == workout_id, WorkoutModel.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return affected

    def list_on_date(self, day: date) -> Sequence[Workout]:
        """Return every workout scheduled on ``day`` across all users."""

        query = (
            self.session.query(WorkoutModel)
            .filter(WorkoutModel.workout_date == day)
            .order_by(WorkoutModel.start_time.asc(), WorkoutModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_starting_between(
        self, day: date, *, after: time, until: time | None
    ) -> Sequence[Workout]:
        """Return workouts on ``day`` starting strictly after ``after`` and no later than ``until``.

        ``until=None`` leaves the window open to the end of the day.
        """

        query = (
            self.session.query(WorkoutModel)
            .filter(WorkoutModel.workout_date == day)
            .filter(WorkoutModel.start_time.is_not(None))
            .filter(WorkoutModel.start_time > after)
        )
        if until is not None:
            query = query.filter(WorkoutModel.start_time <= until)
        query = query.order_by(WorkoutModel.start_time.asc(), WorkoutModel.id.asc())
        return [self._to_entity(model) for model in query.all()]

    def _get_model(
        self, workout_id: UUID, *, user_id: UUID | None = None
    ) -> WorkoutModel | None:
        query = self.session.query(WorkoutModel).filter(WorkoutModel.id == workout_id)
        if user_id is not None:
            query = query.filter(WorkoutModel.user_id == user_id)
        return query.first()

    @staticmethod
    def _apply_entity_to_model(model: WorkoutModel, workout: Workout) -> None:
        model.user_id = workout.user_id
        model.name = workout.name
        model.workout_type = workout.workout_type
        model.duration_minutes = workout.duration_minutes
        model.calories_burned = workout.calories_burned
        model.weight = workout.weight
        model.reps = workout.reps
        model.workout_date = workout.workout_date
        model.start_time = workout.start_time

    @staticmethod
    def _to_entity(model: WorkoutModel) -> Workout:
        return Workout(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            workout_type=model.workout_type,
            duration_minutes=model.duration_minutes,
            calories_burned=model.calories_burned,
            weight=model.weight,
            reps=model.reps,
            workout_date=model.workout_date,
            start_time=model.start_time,
            created_at=model.created_at,
        )


__all__ = ["WorkoutRepository"]
