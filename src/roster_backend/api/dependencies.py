"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import Depends, Request

from roster_backend.api.models import (
    FieldError,
    PayloadValidationError,
    UserCreateRequest,
    UserUpdateRequest,
    validate_create_user,
    validate_update_user,
)
from roster_backend.api.services import UserService
from roster_backend.settings import BackendSettings
from roster_backend.store import UserStore, get_user_store

INVALID_JSON = "Request body must be valid JSON"

UserStoreDep = Annotated[UserStore, Depends(get_user_store)]


def get_app_settings(request: Request) -> BackendSettings:
    """Return the settings the running application was built with."""

    return request.app.state.settings


def get_user_service(store: UserStoreDep) -> UserService:
    """Return a :class:`UserService` bound to the application's store."""

    return UserService(store)


async def _json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError as exc:
        raise PayloadValidationError([FieldError(field="body", message=INVALID_JSON)]) from exc


async def get_create_payload(request: Request) -> UserCreateRequest:
    """Validate the request body as a new user."""

    return validate_create_user(await _json_body(request)).unwrap()


async def get_update_payload(request: Request) -> UserUpdateRequest:
    """Validate the request body as a partial user update."""

    return validate_update_user(await _json_body(request)).unwrap()


AppSettingsDep = Annotated[BackendSettings, Depends(get_app_settings)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
CreatePayloadDep = Annotated[UserCreateRequest, Depends(get_create_payload)]
UpdatePayloadDep = Annotated[UserUpdateRequest, Depends(get_update_payload)]

__all__ = [
    "AppSettingsDep",
    "CreatePayloadDep",
    "UpdatePayloadDep",
    "UserServiceDep",
    "UserStoreDep",
    "get_app_settings",
    "get_create_payload",
    "get_update_payload",
    "get_user_service",
]
