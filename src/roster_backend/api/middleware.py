"""Cross-cutting HTTP middleware: request logging and error conversion."""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from roster_backend.api.models import ErrorResponse

logger = logging.getLogger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]

INTERNAL_ERROR = "Internal Server Error"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request on arrival and on completion."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        method, path = request.method, request.url.path
        logger.info("--> %s %s", method, path)
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "<-- %s %s %s %.1fms", method, path, response.status_code, elapsed_ms
        )
        return response


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Turn any exception escaping the routers into a JSON 500 response."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Error: %s", exc)
            body = ErrorResponse(error=INTERNAL_ERROR, message=str(exc))
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=body.model_dump(),
            )
