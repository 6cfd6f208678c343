"""In-memory storage for user records."""

from roster_backend.store.dependencies import get_user_store
from roster_backend.store.records import UserRecord, isoformat_utc
from roster_backend.store.repository import (
    DEMO_USERS,
    EmailAlreadyExistsError,
    UserNotFoundError,
    UserStore,
    UserStoreError,
)

__all__ = [
    "DEMO_USERS",
    "EmailAlreadyExistsError",
    "UserNotFoundError",
    "UserRecord",
    "UserStore",
    "UserStoreError",
    "get_user_store",
    "isoformat_utc",
]
