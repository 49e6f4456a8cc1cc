"""Security helpers for hashing and token generation."""

from datetime import datetime, timedelta, timezone
import secrets

from jose import JWTError, jwt
from passlib.context import CryptContext

from nutritrack.config import Settings

JWT_ALGORITHM = "HS256"
RESET_TOKEN_BYTES = 32

pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__rounds=310_000,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(
    data: dict,
    settings: Settings,
    expires_delta: timedelta | None = None,
) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode({**data, "exp": expire}, settings.secret_key, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> dict:
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[JWT_ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def generate_reset_token(length: int = RESET_TOKEN_BYTES) -> str:
    """Return a hex encoded random token of ``length`` bytes."""

    return secrets.token_hex(length)


__all__ = [
    "create_access_token",
    "decode_access_token",
    "generate_reset_token",
    "get_password_hash",
    "verify_password",
]
