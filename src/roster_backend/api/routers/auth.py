"""Authentication endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from roster_backend.api.models import AuthStatusResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("", response_model=AuthStatusResponse)
def auth_status() -> AuthStatusResponse:
    """Placeholder for authentication; always returns an empty object."""

    return AuthStatusResponse()
