"""Domain entity representing a pending password reset."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class PasswordReset:
    """One-time token allowing a user to choose a new password."""

    id: int | None
    user_id: UUID
    token: str
    expires_at: datetime
    created_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at


__all__ = ["PasswordReset"]
