"""FastAPI dependencies for store access."""

from __future__ import annotations

from fastapi import Request

from roster_backend.store.repository import UserStore


def get_user_store(request: Request) -> UserStore:
    """Return the :class:`UserStore` attached to the running application."""
    return request.app.state.user_store
