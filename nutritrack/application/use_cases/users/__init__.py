"""Use cases for accounts, authentication and profiles."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .password_reset import (
    PasswordResetTicket,
    build_reset_url,
    request_password_reset,
    reset_password,
)
from .profile import get_profile, update_profile
from .register_user import register_user
from .validators import ensure_strong_password, normalize_email

__all__ = [
    "AuthenticationStatus",
    "PasswordResetTicket",
    "authenticate_user",
    "build_reset_url",
    "ensure_strong_password",
    "get_profile",
    "normalize_email",
    "register_user",
    "request_password_reset",
    "reset_password",
    "update_profile",
]
