"""Exception handlers that render failures as ``{"error": ...}`` bodies."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from roster_backend.api.models import PayloadValidationError, field_errors

VALIDATION_FAILED = "Validation failed"
ROUTE_NOT_FOUND = "Route not found"


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=exc.headers,
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = [error.as_dict() for error in field_errors(exc.errors())]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": VALIDATION_FAILED, "details": details},
    )


async def payload_exception_handler(
    request: Request, exc: PayloadValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": VALIDATION_FAILED, "details": [e.as_dict() for e in exc.errors]},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on ``app``."""

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(PayloadValidationError, payload_exception_handler)


__all__ = [
    "ROUTE_NOT_FOUND",
    "VALIDATION_FAILED",
    "http_exception_handler",
    "payload_exception_handler",
    "register_exception_handlers",
    "validation_exception_handler",
]
