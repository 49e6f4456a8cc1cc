"""SQLAlchemy model for persisted notifications."""

import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.sql import expression

from nutritrack.infrastructure.database import Base


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notifications"
    __table_args__ = (
        Index(
            "ix_notifications_cooldown",
            "user_id",
            "related_id",
            "kind",
            "created_at",
        ),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # Goal or workout id; not a foreign key since it may point at either table.
    related_id = Column(Uuid, nullable=True)
    kind = Column(String(40), nullable=False)
    variant = Column(Text, nullable=True)
    message = Column(Text, nullable=False)
    is_read = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)


__all__ = ["NotificationModel"]
