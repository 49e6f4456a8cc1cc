"""Generic response payloads."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


__all__ = ["MessageResponse"]
