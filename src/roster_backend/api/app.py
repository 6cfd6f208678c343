"""Factory for constructing the FastAPI application."""

from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

from roster_backend.api.errors import ROUTE_NOT_FOUND, register_exception_handlers
from roster_backend.api.middleware import ErrorHandlingMiddleware, RequestLoggingMiddleware
from roster_backend.api.routers import auth_router, health_router, users_router
from roster_backend.logging_config import configure_logging
from roster_backend.settings import BackendSettings, get_settings
from roster_backend.store import UserStore

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]
FALLBACK_METHODS = [*CORS_METHODS, "HEAD"]


def route_not_found(path: str) -> None:
    """Answer any request that no other route matched."""
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ROUTE_NOT_FOUND)


def create_api(
    settings: BackendSettings | None = None, store: UserStore | None = None
) -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    config = settings or get_settings()
    configure_logging(config.log_level)

    if store is None:
        store = UserStore()
        if config.seed_demo_users:
            store.seed_demo_users()

    app = FastAPI(title="Roster API", version=config.app_version)
    app.state.settings = config
    app.state.user_store = store

    # Added first so it sits innermost; CORS headers still wrap the 500 body.
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )
    register_exception_handlers(app)

    api = APIRouter(prefix=config.api_prefix)
    api.include_router(health_router)
    api.include_router(users_router)
    api.include_router(auth_router)
    app.include_router(api)

    # Registered last so real routes win, including for method mismatches.
    app.add_api_route(
        "/{path:path}",
        route_not_found,
        methods=FALLBACK_METHODS,
        include_in_schema=False,
    )

    logger.debug("API ready with %d users under %s", len(store), config.api_prefix)
    return app


__all__ = ["create_api"]
