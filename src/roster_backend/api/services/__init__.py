"""Service layer for API-specific business logic."""

from roster_backend.api.services.users import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    PageResult,
    UserService,
    parse_positive_int,
)

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "PageResult",
    "UserService",
    "parse_positive_int",
]
