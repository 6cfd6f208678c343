"""Pydantic models shared by the gateway-level endpoints."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness payload."""

    status: str = "ok"
    timestamp: str
    version: str


class AuthStatusResponse(BaseModel):
    """Placeholder body for the authentication route."""


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    error: str
    message: str | None = None
