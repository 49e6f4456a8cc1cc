"""Endpoints for registration, login and password resets."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from nutritrack.application.use_cases.notifications import Notifier
from nutritrack.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    register_user,
    request_password_reset,
    reset_password,
)
from nutritrack.config import Settings
from nutritrack.infrastructure.database import get_db
from nutritrack.infrastructure.security import create_access_token
from nutritrack.interfaces.api.dependencies import get_app_settings, get_notifier
from nutritrack.interfaces.api.routes_helpers import bad_request
from nutritrack.interfaces.api.schemas import (
    LoginRequest,
    MessageResponse,
    PasswordResetConfirm,
    PasswordResetRequest,
    PasswordResetRequestResponse,
    RegisterRequest,
    Token,
)

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)

_PASSWORD_RESET_MESSAGE = "If the email exists, you will receive a reset link"


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
) -> MessageResponse:
    try:
        register_user(
            db,
            email=payload.email,
            password=payload.password,
            name=payload.name,
            now=notifier.policy.now(),
        )
    except ValueError as exc:
        raise bad_request(exc) from exc
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=Token)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> Token:
    """Authenticate by email and password and return a JWT."""

    user, auth_status = authenticate_user(db, payload.email, payload.password)
    if auth_status is not AuthenticationStatus.SUCCESS:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Token(token=create_access_token({"sub": str(user.id)}, settings))


@router.post("/request-reset", response_model=PasswordResetRequestResponse)
def request_reset(
    payload: PasswordResetRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    notifier: Notifier = Depends(get_notifier),
) -> PasswordResetRequestResponse:
    """Issue a reset link without revealing whether the account exists."""

    try:
        ticket = request_password_reset(
            db, settings, email=payload.email, now=notifier.policy.now()
        )
    except ValueError as exc:
        raise bad_request(exc) from exc

    response = PasswordResetRequestResponse(message=_PASSWORD_RESET_MESSAGE)
    if ticket is not None and settings.expose_reset_token:
        response.reset_url = ticket.reset_url
        response.token = ticket.token
    return response


@router.post("/reset-password", response_model=MessageResponse)
def confirm_reset(
    payload: PasswordResetConfirm,
    db: Session = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
) -> MessageResponse:
    try:
        reset_password(
            db,
            token=payload.token,
            new_password=payload.new_password,
            now=notifier.policy.now(),
        )
    except ValueError as exc:
        raise bad_request(exc) from exc
    return MessageResponse(message="Password reset successful")
