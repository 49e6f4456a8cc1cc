"""Schemas for the user profile."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class ProfileRead(BaseModel):
    id: UUID
    email: str
    name: str
    role: str
    age: int | None = None
    height: int | None = None
    weight: int | None = None
    created_at: datetime | None = None


class ProfileUpdate(BaseModel):
    name: str
    age: int | None = Field(default=None, ge=0)
    height: int | None = Field(default=None, ge=0)
    weight: int | None = Field(default=None, ge=0)


__all__ = ["ProfileRead", "ProfileUpdate"]
