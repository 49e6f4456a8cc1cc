"""Authentication related schemas."""

from pydantic import BaseModel, EmailStr, Field


class RegisterRequest(BaseModel):
    email: str
    password: str
    name: str = ""


class LoginRequest(BaseModel):
    email: str
    password: str


class Token(BaseModel):
    token: str


class PasswordResetRequest(BaseModel):
    email: EmailStr = Field(..., description="Registered email address")


class PasswordResetRequestResponse(BaseModel):
    message: str
    reset_url: str | None = None
    token: str | None = None


class PasswordResetConfirm(BaseModel):
    token: str
    new_password: str


__all__ = [
    "LoginRequest",
    "PasswordResetConfirm",
    "PasswordResetRequest",
    "PasswordResetRequestResponse",
    "RegisterRequest",
    "Token",
]
