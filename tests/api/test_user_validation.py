"""Tests for the user payload schemas and validation helpers."""

from __future__ import annotations

import pytest

from roster_backend.api.models import (
    FieldError,
    PayloadValidationError,
    UserUpdateRequest,
    field_errors,
    validate_create_user,
    validate_update_user,
)
from roster_backend.api.models.users import check_email_syntax


def test_valid_create_payload() -> None:
    result = validate_create_user({"name": "Ada", "email": "ada@example.com"})

    assert result.ok
    assert result.payload is not None
    assert result.payload.name == "Ada"
    assert result.payload.email == "ada@example.com"


def test_create_payload_ignores_unknown_keys() -> None:
    result = validate_create_user(
        {"name": "Ada", "email": "ada@example.com", "role": "admin"}
    )

    assert result.ok
    assert "role" not in result.payload.model_dump()


@pytest.mark.parametrize(
    ("data", "fields"),
    [
        ({}, {"name", "email"}),
        ({"name": "", "email": "ada@example.com"}, {"name"}),
        ({"name": "Ada", "email": "ada.example.com"}, {"email"}),
        ({"name": 5, "email": None}, {"name", "email"}),
    ],
)
def test_invalid_create_payload_lists_every_field(
    data: dict, fields: set[str]
) -> None:
    result = validate_create_user(data)

    assert not result.ok
    assert result.payload is None
    assert {error.field for error in result.errors} == fields
    assert all(error.message for error in result.errors)


def test_empty_update_is_valid_noop() -> None:
    result = validate_update_user({})

    assert result.ok
    assert result.payload.changes() == {}


def test_update_reports_only_sent_fields() -> None:
    payload = UserUpdateRequest.model_validate({"email": "new@example.com"})

    assert payload.changes() == {"email": "new@example.com"}


def test_update_rejects_null_and_empty_values() -> None:
    result = validate_update_user({"name": None, "email": ""})

    assert {error.field for error in result.errors} == {"name", "email"}


def test_field_errors_strip_request_location() -> None:
    errors = [
        {"loc": ("body", "email"), "msg": "value is not a valid email address"},
        {"loc": ("body",), "msg": "Field required"},
        {"loc": ("query", "page"), "msg": "bad"},
    ]

    assert field_errors(errors) == [
        FieldError(field="email", message="value is not a valid email address"),
        FieldError(field="body", message="Field required"),
        FieldError(field="page", message="bad"),
    ]


def test_email_is_not_normalized() -> None:
    result = validate_create_user({"name": "Ada", "email": "Ada@Example.COM"})

    assert result.payload.email == "Ada@Example.COM"


@pytest.mark.parametrize("email", ["t@site.test", "a@b.example", "x@mail.example.com"])
def test_reserved_domains_pass_syntax_check(email: str) -> None:
    assert check_email_syntax(email) == email


def test_unwrap_raises_with_every_field_error() -> None:
    result = validate_create_user({"name": ""})

    with pytest.raises(PayloadValidationError) as excinfo:
        result.unwrap()

    assert {error.field for error in excinfo.value.errors} == {"name", "email"}


def test_unwrap_returns_valid_payload() -> None:
    payload = validate_update_user({"name": "New"}).unwrap()

    assert payload.changes() == {"name": "New"}
