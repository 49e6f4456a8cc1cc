"""Persistence layer for goals."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from uuid import UUID

from sqlalchemy.orm import Session

from nutritrack.domain.entities import Goal
from nutritrack.infrastructure.models import GoalModel

SORTABLE_COLUMNS = {
    "created_at": GoalModel.created_at,
    "target_value": GoalModel.target_value,
    "goal_type": GoalModel.goal_type,
    "progress_value": GoalModel.progress_value,
}


class GoalRepository:
    """Provide CRUD operations for goal entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, goal_id: UUID, *, user_id: UUID | None = None) -> Goal | None:
        model = self._get_model(goal_id, user_id=user_id)
        return self._to_entity(model) if model else None

    def get_by_type(self, user_id: UUID, goal_type: str) -> Goal | None:
        model = (
            self.session.query(GoalModel)
            .filter(GoalModel.user_id == user_id, GoalModel.goal_type == goal_type)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, goal: Goal) -> Goal:
        model = GoalModel()
        self._apply_entity_to_model(model, goal)
        model.created_at = goal.created_at
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, goal: Goal) -> Goal | None:
        """Persist ``goal`` when it exists for its owner; return ``None`` otherwise."""

        if goal.id is None:
            raise ValueError("Goal id is required for updates")
        model = self._get_model(goal.id, user_id=goal.user_id)
        if model is None:
            return None
        self._apply_entity_to_model(model, goal)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_for_user(
        self,
        user_id: UUID,
        *,
        completed: bool | None = None,
        include_archived: bool = False,
        sort_by: str = "created_at",
        descending: bool = True,
        limit: int = 10,
        offset: int = 0,
    ) -> Sequence[Goal]:
        query = self.session.query(GoalModel).filter(GoalModel.user_id == user_id)
        if not include_archived:
            query = query.filter(GoalModel.archived.is_(False))
        if completed is not None:
            query = query.filter(GoalModel.is_completed.is_(completed))
        column = SORTABLE_COLUMNS.get(sort_by, GoalModel.created_at)
        query = query.order_by(column.desc() if descending else column.asc())
        query = query.offset(offset).limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def set_archived(
        self, goal_id: UUID, *, user_id: UUID, archived: bool, now: datetime
    ) -> int:
        """Flip the archived flag when it currently holds the opposite value."""

        affected = (
            self.session.query(GoalModel)
            .filter(
                GoalModel.id == goal_id,
                GoalModel.user_id == user_id,
                GoalModel.archived.is_(not archived),
            )
            .update(
                {GoalModel.archived: archived, GoalModel.updated_at: now},
                synchronize_session=False,
            )
        )
        self.session.commit()
        return affected

    def list_overdue(self, *, updated_before: datetime) -> Sequence[Goal]:
        """Return active, incomplete goals untouched since ``updated_before``."""

        query = (
            self.session.query(GoalModel)
            .filter(GoalModel.is_completed.is_(False))
            .filter(GoalModel.archived.is_(False))
            .filter(GoalModel.updated_at <= updated_before)
            .order_by(GoalModel.updated_at.asc(), GoalModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def _get_model(self, goal_id: UUID, *, user_id: UUID | None = None) -> GoalModel | None:
        query = self.session.query(GoalModel).filter(GoalModel.id == goal_id)
        if user_id is not None:
            query = query.filter(GoalModel.user_id == user_id)
        return query.first()

    @staticmethod
    def _apply_entity_to_model(model: GoalModel, goal: Goal) -> None:
        model.user_id = goal.user_id
        model.goal_type = goal.goal_type
        model.target_value = goal.target_value
        model.progress_value = goal.progress_value
        model.time_frame = goal.time_frame
        model.is_completed = goal.is_completed
        model.archived = goal.archived
        model.updated_at = goal.updated_at

    @staticmethod
    def _to_entity(model: GoalModel) -> Goal:
        return Goal(
            id=model.id,
            user_id=model.user_id,
            goal_type=model.goal_type,
            target_value=model.target_value,
            progress_value=model.progress_value,
            time_frame=model.time_frame,
            is_completed=model.is_completed,
            archived=model.archived,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["GoalRepository", "SORTABLE_COLUMNS"]
