"""Roster backend: an in-memory user directory served over FastAPI."""

from roster_backend.api import create_api
from roster_backend.main import run_dev, run_prod
from roster_backend.settings import BackendSettings, get_settings, settings
from roster_backend.store import (
    EmailAlreadyExistsError,
    UserNotFoundError,
    UserRecord,
    UserStore,
)

main = run_dev

__all__ = [
    "BackendSettings",
    "EmailAlreadyExistsError",
    "UserNotFoundError",
    "UserRecord",
    "UserStore",
    "create_api",
    "get_settings",
    "main",
    "run_dev",
    "run_prod",
    "settings",
]
