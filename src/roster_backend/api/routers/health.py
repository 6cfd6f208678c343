"""Service health endpoint."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter

from roster_backend.api.dependencies import AppSettingsDep
from roster_backend.api.models import HealthResponse
from roster_backend.store import isoformat_utc

router = APIRouter(tags=["health"])


@router.api_route("/health", methods=["GET", "HEAD"], response_model=HealthResponse)
def health(settings: AppSettingsDep) -> HealthResponse:
    """Report liveness, server time and the deployed version."""

    return HealthResponse(
        timestamp=isoformat_utc(datetime.now(UTC)),
        version=settings.app_version,
    )
