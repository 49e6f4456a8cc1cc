"""SQLAlchemy model for user goals."""

import uuid

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.sql import expression

from nutritrack.infrastructure.database import Base


class GoalModel(Base):
    """Database representation of a goal tracked by a user."""

    __tablename__ = "user_goals"
    __table_args__ = (UniqueConstraint("user_id", "goal_type", name="uq_user_goal_type"),)

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    goal_type = Column(String(50), nullable=False)
    target_value = Column(Integer, nullable=False)
    progress_value = Column(Integer, nullable=False, default=0)
    time_frame = Column(String(20), nullable=False)
    is_completed = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    archived = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False, index=True)


__all__ = ["GoalModel"]
