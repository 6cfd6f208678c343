"""Structured validation results for user payloads.

The write endpoints validate their JSON bodies through these helpers: each
returns a tagged :class:`ValidationResult`, and :meth:`ValidationResult.unwrap`
raises :class:`PayloadValidationError` carrying every :class:`FieldError`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from roster_backend.api.models.users import UserCreateRequest, UserUpdateRequest

ModelT = TypeVar("ModelT", bound=BaseModel)

# Leading location segments that name where a value came from, not the field.
_SOURCE_LOCATIONS = frozenset({"body", "query", "path", "header", "cookie"})


@dataclass(frozen=True, slots=True)
class FieldError:
    """One violated constraint."""

    field: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True, slots=True)
class ValidationResult(Generic[ModelT]):
    """Either a validated payload or the list of field errors."""

    payload: ModelT | None = None
    errors: tuple[FieldError, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> ModelT:
        """Return the payload or raise :class:`PayloadValidationError`."""
        if self.errors or self.payload is None:
            raise PayloadValidationError(self.errors)
        return self.payload


class PayloadValidationError(ValueError):
    """Raised when a request body fails validation."""

    def __init__(self, errors: Iterable[FieldError]) -> None:
        self.errors = tuple(errors)
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in self.errors))


def field_errors(errors: Iterable[Mapping[str, Any]]) -> list[FieldError]:
    """Convert pydantic/FastAPI error dicts into :class:`FieldError` items."""

    result: list[FieldError] = []
    for error in errors:
        location: Sequence[Any] = error.get("loc", ())
        if location and location[0] in _SOURCE_LOCATIONS:
            location = location[1:]
        name = ".".join(str(part) for part in location) or "body"
        result.append(FieldError(field=name, message=str(error.get("msg", ""))))
    return result


def validate_payload(model: type[ModelT], data: Any) -> ValidationResult[ModelT]:
    """Validate ``data`` against ``model`` without raising."""

    try:
        payload = model.model_validate(data)
    except ValidationError as exc:
        return ValidationResult(errors=tuple(field_errors(exc.errors())))
    return ValidationResult(payload=payload)


def validate_create_user(data: Any) -> ValidationResult[UserCreateRequest]:
    return validate_payload(UserCreateRequest, data)


def validate_update_user(data: Any) -> ValidationResult[UserUpdateRequest]:
    return validate_payload(UserUpdateRequest, data)
