"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

DEFAULT_ROLE = "user"


@dataclass
class User:
    """Core attributes describing an application user."""

    id: UUID | None
    email: str
    password: str
    name: str
    role: str = DEFAULT_ROLE
    age: int | None = None
    height: int | None = None
    weight: int | None = None
    created_at: datetime | None = None


__all__ = ["DEFAULT_ROLE", "User"]
