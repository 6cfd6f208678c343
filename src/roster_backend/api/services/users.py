"""User listing, search and pagination on top of :class:`UserStore`."""

from __future__ import annotations

import math
from dataclasses import dataclass

from roster_backend.store import UserRecord, UserStore

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def parse_positive_int(raw: str | None, default: int) -> int:
    """Parse a query value, falling back to ``default`` and clamping to at least 1."""

    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(value, 1)


@dataclass(slots=True)
class PageResult:
    """A slice of users plus the paging numbers that describe it."""

    users: list[UserRecord]
    page: int
    limit: int
    total: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit)


class UserService:
    """Read-side helpers for the users router."""

    def __init__(self, store: UserStore) -> None:
        self._store = store

    def list_page(
        self, *, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT, search: str = ""
    ) -> PageResult:
        """Filter by ``search`` and return the requested page."""

        if page < 1 or limit < 1:
            msg = "page and limit must be positive"
            raise ValueError(msg)
        matched = self._store.list(search or None)
        start = (page - 1) * limit
        return PageResult(
            users=matched[start : start + limit],
            page=page,
            limit=limit,
            total=len(matched),
        )
