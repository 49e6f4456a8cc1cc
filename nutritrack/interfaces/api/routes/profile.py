"""Endpoints for the authenticated user's profile."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from nutritrack.application.use_cases.users import get_profile, update_profile
from nutritrack.domain.entities import User
from nutritrack.infrastructure.database import get_db
from nutritrack.interfaces.api.dependencies import get_current_user
from nutritrack.interfaces.api.routes_helpers import bad_request
from nutritrack.interfaces.api.schemas import ProfileRead, ProfileUpdate

router = APIRouter(prefix="/user", tags=["profile"])


def _user_to_schema(user: User) -> ProfileRead:
    return ProfileRead(
        id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
        age=user.age,
        height=user.height,
        weight=user.weight,
        created_at=user.created_at,
    )


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")


@router.get("/profile", response_model=ProfileRead)
def read_profile(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProfileRead:
    user = get_profile(db, current_user.id)
    if user is None:
        raise _not_found()
    return _user_to_schema(user)


@router.put("/profile", response_model=ProfileRead)
def edit_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProfileRead:
    try:
        user = update_profile(
            db,
            current_user.id,
            name=payload.name,
            age=payload.age,
            height=payload.height,
            weight=payload.weight,
        )
    except ValueError as exc:
        raise bad_request(exc) from exc
    if user is None:
        raise _not_found()
    return _user_to_schema(user)
