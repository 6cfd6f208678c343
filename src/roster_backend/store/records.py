"""User record stored in memory."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime


def isoformat_utc(moment: datetime) -> str:
    """Render ``moment`` as ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""

    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(slots=True)
class UserRecord:
    """A registered user as kept by :class:`UserStore`."""

    id: str
    name: str
    email: str
    created_at: str

    def matches(self, search: str) -> bool:
        """Return whether ``search`` occurs in the name or email, ignoring case."""

        needle = search.lower()
        return needle in self.name.lower() or needle in self.email.lower()
