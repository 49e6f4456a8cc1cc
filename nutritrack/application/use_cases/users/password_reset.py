"""Use cases for the forgotten-password flow."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from nutritrack.config import Settings
from nutritrack.domain.entities import PasswordReset
from nutritrack.infrastructure.email import send_password_reset_email
from nutritrack.infrastructure.repositories import PasswordResetRepository, UserRepository
from nutritrack.infrastructure.security import generate_reset_token, get_password_hash

from .validators import ensure_strong_password, normalize_email

logger = logging.getLogger(__name__)

RESET_PATH = "/reset-password"


@dataclass(frozen=True)
class PasswordResetTicket:
    """Token issued for a reset request and the link mailed to the user."""

    token: str
    reset_url: str
    email_sent: bool


def build_reset_url(frontend_url: str, token: str) -> str:
    return f"{frontend_url.rstrip('/')}{RESET_PATH}?token={token}"


def request_password_reset(
    session: Session, settings: Settings, *, email: str, now: datetime
) -> PasswordResetTicket | None:
    """Issue a reset token for ``email``.

    Returns ``None`` for unknown addresses so callers can answer identically
    whether or not the account exists.
    """

    email = normalize_email(email)
    user = UserRepository(session).get_by_email(email)
    if user is None:
        logger.info("Password reset requested for unknown email")
        return None

    token = generate_reset_token()
    PasswordResetRepository(session).create(
        PasswordReset(
            id=None,
            user_id=user.id,
            token=token,
            expires_at=now + timedelta(minutes=settings.password_reset_expire_minutes),
            created_at=now,
        )
    )
    reset_url = build_reset_url(settings.frontend_url, token)
    email_sent = send_password_reset_email(email, reset_url, settings)
    if not email_sent:
        logger.warning("Password reset email for user %s was not delivered", user.id)
    return PasswordResetTicket(token=token, reset_url=reset_url, email_sent=email_sent)


def reset_password(
    session: Session, *, token: str, new_password: str, now: datetime
) -> None:
    """Consume ``token`` and set ``new_password`` on its user."""

    token = (token or "").strip()
    if not token:
        raise ValueError("Token is required")
    ensure_strong_password(new_password or "")

    resets = PasswordResetRepository(session)
    reset = resets.get_by_token(token)
    if reset is None:
        raise ValueError("Invalid or expired token")
    if reset.is_expired(now):
        raise ValueError("Token has expired")

    users = UserRepository(session)
    user = users.get(reset.user_id)
    if user is None:
        raise ValueError("Invalid or expired token")

    user.password = get_password_hash(new_password)
    users.update(user)
    resets.delete_token(token)
