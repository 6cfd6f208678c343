"""User CRUD endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from roster_backend.api.dependencies import (
    CreatePayloadDep,
    UpdatePayloadDep,
    UserServiceDep,
    UserStoreDep,
)
from roster_backend.api.models import (
    ErrorResponse,
    Pagination,
    UserCreateRequest,
    UserDeletedResponse,
    UserEnvelope,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)
from roster_backend.api.services import DEFAULT_LIMIT, DEFAULT_PAGE, parse_positive_int
from roster_backend.store import (
    EmailAlreadyExistsError,
    UserNotFoundError,
    UserRecord,
)

router = APIRouter(prefix="/users", tags=["users"])

USER_NOT_FOUND = "User not found"
EMAIL_EXISTS = "Email already exists"

_NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_CONFLICT_RESPONSE = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


def _json_body_schema(model: type[BaseModel]) -> dict:
    """Describe a body that is read by a dependency rather than a parameter."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


def _to_response(user: UserRecord) -> UserResponse:
    return UserResponse.model_validate(user, from_attributes=True)


@router.get("", response_model=UserListResponse)
def list_users(
    service: UserServiceDep,
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    search: str = Query(default=""),
) -> UserListResponse:
    """List users, filtered by ``search`` and sliced into pages."""

    result = service.list_page(
        page=parse_positive_int(page, DEFAULT_PAGE),
        limit=parse_positive_int(limit, DEFAULT_LIMIT),
        search=search,
    )
    return UserListResponse(
        users=[_to_response(user) for user in result.users],
        pagination=Pagination(
            page=result.page,
            limit=result.limit,
            total=result.total,
            pages=result.pages,
        ),
    )


@router.get("/{user_id}", response_model=UserEnvelope, responses=_NOT_FOUND_RESPONSE)
def get_user(user_id: str, store: UserStoreDep) -> UserEnvelope:
    """Return a single user."""

    try:
        user = store.get_by_id(user_id)
    except UserNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND
        ) from exc
    return UserEnvelope(user=_to_response(user))


@router.post(
    "",
    response_model=UserEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=_CONFLICT_RESPONSE,
    openapi_extra=_json_body_schema(UserCreateRequest),
)
def create_user(payload: CreatePayloadDep, store: UserStoreDep) -> UserEnvelope:
    """Create a user with a unique email."""

    try:
        user = store.insert(payload.name, payload.email)
    except EmailAlreadyExistsError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=EMAIL_EXISTS
        ) from exc
    return UserEnvelope(user=_to_response(user))


@router.put(
    "/{user_id}",
    response_model=UserEnvelope,
    responses={**_NOT_FOUND_RESPONSE, **_CONFLICT_RESPONSE},
    openapi_extra=_json_body_schema(UserUpdateRequest),
)
def update_user(
    user_id: str, payload: UpdatePayloadDep, store: UserStoreDep
) -> UserEnvelope:
    """Apply the provided fields to an existing user."""

    try:
        user = store.update(user_id, **payload.changes())
    except UserNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND
        ) from exc
    except EmailAlreadyExistsError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=EMAIL_EXISTS
        ) from exc
    return UserEnvelope(user=_to_response(user))


@router.delete(
    "/{user_id}", response_model=UserDeletedResponse, responses=_NOT_FOUND_RESPONSE
)
def delete_user(user_id: str, store: UserStoreDep) -> UserDeletedResponse:
    """Remove a user and echo the removed record."""

    try:
        user = store.delete(user_id)
    except UserNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND
        ) from exc
    return UserDeletedResponse(user=_to_response(user))
