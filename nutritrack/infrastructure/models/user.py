"""SQLAlchemy model for the user table."""

import uuid

from sqlalchemy import Column, DateTime, Integer, String, Uuid, func

from nutritrack.infrastructure.database import Base


class UserModel(Base):
    """Database representation of an application user."""

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    name = Column(String(120), nullable=False, default="")
    role = Column(String(20), nullable=False, default="user")
    age = Column(Integer, nullable=True)
    height = Column(Integer, nullable=True)
    weight = Column(Integer, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


__all__ = ["UserModel"]
