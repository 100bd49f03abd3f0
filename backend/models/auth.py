"""Authentication models for the demo login and session cookie."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Credentials posted to /api/auth/login (JSON, form or query string)."""

    model_config = ConfigDict(extra="ignore")

    email: str = Field(default="", max_length=320)
    password: str = Field(default="", max_length=256)


class SessionUser(BaseModel):
    """Public view of the signed-in account."""

    email: str


class LoginResponse(BaseModel):
    """Response after a successful login."""

    ok: bool = True
    user: SessionUser


class AuthError(BaseModel):
    """Body of a failed login."""

    ok: bool = False
    error: str


class LogoutResponse(BaseModel):
    """Response after logout."""

    ok: bool = True
