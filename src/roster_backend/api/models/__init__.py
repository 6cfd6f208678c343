"""Models used for API request and response payloads."""

from roster_backend.api.models.system import (
    AuthStatusResponse,
    ErrorResponse,
    HealthResponse,
)
from roster_backend.api.models.users import (
    Pagination,
    UserCreateRequest,
    UserDeletedResponse,
    UserEnvelope,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)
from roster_backend.api.models.validation import (
    FieldError,
    PayloadValidationError,
    ValidationResult,
    field_errors,
    validate_create_user,
    validate_payload,
    validate_update_user,
)

__all__ = [
    "AuthStatusResponse",
    "ErrorResponse",
    "FieldError",
    "HealthResponse",
    "Pagination",
    "PayloadValidationError",
    "UserCreateRequest",
    "UserDeletedResponse",
    "UserEnvelope",
    "UserListResponse",
    "UserResponse",
    "UserUpdateRequest",
    "ValidationResult",
    "field_errors",
    "validate_create_user",
    "validate_payload",
    "validate_update_user",
]
