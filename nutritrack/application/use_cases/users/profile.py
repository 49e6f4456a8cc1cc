"""Use cases for reading and editing the current user's profile."""

from uuid import UUID

from sqlalchemy.orm import Session

from nutritrack.domain.entities import User
from nutritrack.infrastructure.repositories import UserRepository


def get_profile(session: Session, user_id: UUID) -> User | None:
    return UserRepository(session).get(user_id)


def update_profile(
    session: Session,
    user_id: UUID,
    *,
    name: str,
    age: int | None = None,
    height: int | None = None,
    weight: int | None = None,
) -> User | None:
    """Overwrite the profile fields; ``None`` when the user no longer exists."""

    name = (name or "").strip()
    if not name:
        raise ValueError("Name cannot be empty")

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        return None

    user.name = name
    user.age = age
    user.height = height
    user.weight = weight
    return repository.update(user)
