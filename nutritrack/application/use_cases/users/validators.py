"""Common validation helpers for user use cases."""

import re

MIN_PASSWORD_LENGTH = 8
_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")


def normalize_email(email: str) -> str:
    """Return a trimmed, lower-cased email address or raise ``ValueError``."""

    normalized = (email or "").strip().lower()
    if not _EMAIL_PATTERN.match(normalized):
        raise ValueError("invalid email format")
    return normalized


def ensure_strong_password(password: str) -> str:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"password must be at least {MIN_PASSWORD_LENGTH} characters")
    if not re.search(r"[A-Z]", password):
        raise ValueError("password must contain at least one uppercase letter")
    if not re.search(r"[a-z]", password):
        raise ValueError("password must contain at least one lowercase letter")
    if not re.search(r"[0-9]", password):
        raise ValueError("password must contain at least one number")
    return password
