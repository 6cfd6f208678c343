"""Pydantic models for user endpoints."""

from __future__ import annotations

from typing import Annotated

from email_validator import validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator


def check_email_syntax(value: str) -> str:
    """Reject malformed addresses and return ``value`` exactly as sent."""

    # Syntax only: no DNS lookups, ".test" domains allowed, no normalization.
    validate_email(
        value,
        check_deliverability=False,
        globally_deliverable=False,
        test_environment=True,
    )
    return value


EmailAddress = Annotated[str, AfterValidator(check_email_syntax)]


class UserResponse(BaseModel):
    """Public representation of a stored user."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    name: str
    email: str
    created_at: str = Field(alias="createdAt")


class UserCreateRequest(BaseModel):
    """Payload for creating a new user."""

    name: str = Field(min_length=1)
    email: EmailAddress


class UserUpdateRequest(BaseModel):
    """Partial update; only the keys sent by the client are applied."""

    name: str | None = Field(default=None, min_length=1)
    email: EmailAddress | None = None

    @field_validator("name", "email", mode="before")
    @classmethod
    def reject_null(cls, value: object) -> object:
        if value is None:
            msg = "value must not be null"
            raise ValueError(msg)
        return value

    def changes(self) -> dict[str, str]:
        """Return the fields explicitly provided in the payload."""
        return self.model_dump(exclude_unset=True)


class UserEnvelope(BaseModel):
    """Single-user response body."""

    user: UserResponse


class Pagination(BaseModel):
    """Paging metadata for list responses."""

    page: int
    limit: int
    total: int
    pages: int


class UserListResponse(BaseModel):
    """Paged list of users."""

    users: list[UserResponse]
    pagination: Pagination


class UserDeletedResponse(BaseModel):
    """Response returned after a user is removed."""

    message: str = "User deleted successfully"
    user: UserResponse
