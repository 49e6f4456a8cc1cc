"""Persistence helpers for password reset tokens."""

from __future__ import annotations

from sqlalchemy.orm import Session

from nutritrack.domain.entities import PasswordReset
from nutritrack.infrastructure.models import PasswordResetModel


class PasswordResetRepository:
    """Store and consume one-time password reset tokens."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, reset: PasswordReset) -> PasswordReset:
        model = PasswordResetModel(
            user_id=reset.user_id,
            token=reset.token,
            expires_at=reset.expires_at,
        )
        if reset.created_at is not None:
            model.created_at = reset.created_at
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def get_by_token(self, token: str) -> PasswordReset | None:
        model = self.session.query(PasswordResetModel).filter_by(token=token).first()
        return self._to_entity(model) if model else None

    def delete_token(self, token: str) -> int:
        affected = (
            self.session.query(PasswordResetModel)
            .filter(PasswordResetModel.token == token)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return affected

    @staticmethod
    def _to_entity(model: PasswordResetModel) -> PasswordReset:
        return PasswordReset(
            id=model.id,
            user_id=model.user_id,
            token=model.token,
            expires_at=model.expires_at,
            created_at=model.created_at,
        )


__all__ = ["PasswordResetRepository"]
