"""Use case for registering users."""

from datetime import datetime

from sqlalchemy.orm import Session

from nutritrack.domain.entities import DEFAULT_ROLE, User
from nutritrack.infrastructure.repositories import UserRepository
from nutritrack.infrastructure.security import get_password_hash

from .validators import ensure_strong_password, normalize_email


def register_user(
    session: Session, *, email: str, password: str, name: str, now: datetime
) -> User:
    """Create a new user ensuring unique email addresses."""

    password = (password or "").strip()
    if not (email or "").strip() or not password:
        raise ValueError("Email and password are required")
    email = normalize_email(email)
    ensure_strong_password(password)

    repository = UserRepository(session)
    if repository.get_by_email(email):
        raise ValueError("Email already exists")

    user = User(
        id=None,
        email=email,
        password=get_password_hash(password),
        name=(name or "").strip(),
        role=DEFAULT_ROLE,
        created_at=now,
    )
    return repository.create(user)
