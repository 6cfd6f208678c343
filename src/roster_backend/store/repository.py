"""In-memory user store."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import UTC, datetime

from roster_backend.store.records import UserRecord, isoformat_utc

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

DEMO_USERS: tuple[tuple[str, str, str], ...] = (
    ("1", "John Doe", "john@example.com"),
    ("2", "Jane Smith", "jane@example.com"),
)


class UserStoreError(Exception):
    """Base class for store failures."""


class UserNotFoundError(UserStoreError, LookupError):
    """Raised when no user has the requested id."""

    def __init__(self, user_id: str) -> None:
        super().__init__(user_id)
        self.user_id = user_id


class EmailAlreadyExistsError(UserStoreError):
    """Raised when an email is already taken by another user."""

    def __init__(self, email: str) -> None:
        super().__init__(email)
        self.email = email


def _utc_now() -> datetime:
    return datetime.now(UTC)


class UserStore:
    """Ordered, process-local collection of :class:`UserRecord`.

    Lookups are linear scans. Every access holds an internal lock so that the
    email uniqueness check and the following mutation happen atomically.
    """

    def __init__(self, *, clock: Clock = _utc_now) -> None:
        self._clock = clock
        self._users: list[UserRecord] = []
        self._last_id = 0
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def list(self, search: str | None = None) -> list[UserRecord]:
        """Return users in insertion order, optionally filtered by ``search``."""
        with self._lock:
            if not search:
                return list(self._users)
            return [user for user in self._users if user.matches(search)]

    def get_by_id(self, user_id: str) -> UserRecord:
        """Return the user with ``user_id``."""
        with self._lock:
            return self._users[self._index_of(user_id)]

    def insert(self, name: str, email: str) -> UserRecord:
        """Append a new user and return it."""
        with self._lock:
            if self._find_by_email(email) is not None:
                raise EmailAlreadyExistsError(email)
            now = self._clock()
            user = UserRecord(
                id=self._next_id(now),
                name=name,
                email=email,
                created_at=isoformat_utc(now),
            )
            self._users.append(user)
        logger.debug("Created user %s", user.id)
        return user

    def update(
        self, user_id: str, *, name: str | None = None, email: str | None = None
    ) -> UserRecord:
        """Merge the provided fields into an existing user."""
        with self._lock:
            user = self._users[self._index_of(user_id)]
            if email is not None:
                owner = self._find_by_email(email)
                if owner is not None and owner.id != user_id:
                    raise EmailAlreadyExistsError(email)
            if name is not None:
                user.name = name
            if email is not None:
                user.email = email
        logger.debug("Updated user %s", user_id)
        return user

    def delete(self, user_id: str) -> UserRecord:
        """Remove a user and return the removed record."""
        with self._lock:
            user = self._users.pop(self._index_of(user_id))
        logger.debug("Deleted user %s", user_id)
        return user

    def seed_demo_users(self) -> None:
        """Load the two demonstration users with fixed ids."""
        with self._lock:
            created_at = isoformat_utc(self._clock())
            for user_id, name, email in DEMO_USERS:
                if self._find_by_email(email) is not None:
                    raise EmailAlreadyExistsError(email)
                self._users.append(
                    UserRecord(id=user_id, name=name, email=email, created_at=created_at)
                )
                self._last_id = max(self._last_id, int(user_id))

    def _index_of(self, user_id: str) -> int:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        raise UserNotFoundError(user_id)

    def _find_by_email(self, email: str) -> UserRecord | None:
        return next((user for user in self._users if user.email == email), None)

    def _next_id(self, now: datetime) -> str:
        # Millisecond timestamp, bumped when the clock has not advanced.
        candidate = max(int(now.timestamp() * 1000), self._last_id + 1)
        self._last_id = candidate
        return str(candidate)
