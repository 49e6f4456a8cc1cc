"""FastAPI dependency utilities."""

from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from nutritrack.application.use_cases.notifications import Notifier
from nutritrack.config import Settings
from nutritrack.domain.entities import User
from nutritrack.infrastructure.database import get_db
from nutritrack.infrastructure.nutrition_client import NutritionService
from nutritrack.infrastructure.repositories import UserRepository
from nutritrack.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")

_CREDENTIALS_ERROR = "Could not validate credentials"


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier


def get_nutrition_service(request: Request) -> NutritionService:
    return request.app.state.nutrition_service


def _unauthorized(detail: str = _CREDENTIALS_ERROR) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session, settings: Settings) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token, settings)
    except ValueError as exc:
        raise _unauthorized() from exc

    subject = payload.get("sub")
    if not isinstance(subject, str):
        raise _unauthorized()
    try:
        user_id = UUID(subject)
    except ValueError as exc:
        raise _unauthorized() from exc

    user = UserRepository(db).get(user_id)
    if user is None:
        raise _unauthorized("User not found")
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> User:
    """Return the authenticated user from the bearer token."""

    return resolve_current_user(token, db, settings)
