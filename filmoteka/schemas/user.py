from __future__ import annotations

"""Auth request/response schemas."""

from pydantic import BaseModel, Field


class CredentialsIn(BaseModel):
    """Body of `POST /login` and `POST /register`."""
    username: str = Field(..., min_length=1, max_length=255, pattern=r"^[a-zA-Z0-9_]+$")
    password: str = Field(..., min_length=8, max_length=255)


class SessionOut(BaseModel):
    session_id: str


class ResultOut(BaseModel):
    result: str = "success"


__all__ = ["CredentialsIn", "SessionOut", "ResultOut"]
