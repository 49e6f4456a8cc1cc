"""SQLAlchemy model for scheduled workouts."""

import uuid

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    Text,
    Time,
    Uuid,
)

from nutritrack.infrastructure.database import Base


class WorkoutModel(Base):
    """Database representation of a workout."""

    __tablename__ = "workouts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(Text, nullable=False)
    workout_type = Column(Text, nullable=True)
    duration_minutes = Column(Integer, nullable=False, default=0)
    calories_burned = Column(Integer, nullable=True)
    weight = Column(Float, nullable=True)
    reps = Column(Integer, nullable=True)
    workout_date = Column(Date, nullable=False, index=True)
    start_time = Column(Time, nullable=True)
    created_at = Column(DateTime, nullable=False)


__all__ = ["WorkoutModel"]
