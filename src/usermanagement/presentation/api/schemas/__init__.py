"""Pydantic request/response schemas for the REST API."""

from usermanagement.presentation.api.schemas.common import (
    ErrorResponse,
    FieldErrorResponse,
    HealthResponse,
)
from usermanagement.presentation.api.schemas.events import EventAcceptedResponse
from usermanagement.presentation.api.schemas.users import (
    UserPageResponse,
    UserRequest,
    UserResponse,
    UserSortField,
    UserStatsResponse,
)

__all__ = [
    "ErrorResponse",
    "EventAcceptedResponse",
    "FieldErrorResponse",
    "HealthResponse",
    "UserPageResponse",
    "UserRequest",
    "UserResponse",
    "UserSortField",
    "UserStatsResponse",
]
