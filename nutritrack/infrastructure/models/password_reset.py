"""SQLAlchemy model for password reset tokens."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Uuid, func

from nutritrack.infrastructure.database import Base


class PasswordResetModel(Base):
    """Pending password reset token for a user."""

    __tablename__ = "password_resets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    token = Column(String(255), nullable=False, unique=True)
    expires_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


__all__ = ["PasswordResetModel"]
