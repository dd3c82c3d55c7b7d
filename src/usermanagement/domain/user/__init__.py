"""User domain - manages the user record and its lifecycle rules.

This domain handles:
- User aggregate (identity, contact data, role and status)
- Change events emitted after mutations
- Repository interface (implementation in infrastructure)

Design notes:
- User ID is assigned by the store on first save
- Email is unique among stored users, compared case-insensitively
- Status defaults to ACTIVE and is only changed when explicitly given
"""

from usermanagement.domain.user.aggregates import User
from usermanagement.domain.user.events import UserEvent, UserEventType
from usermanagement.domain.user.exceptions import (
    DuplicateEmailError,
    InvalidEmailError,
    UserNotFoundError,
)
from usermanagement.domain.user.repositories import UserRepository
from usermanagement.domain.user.value_objects import (
    Email,
    UserCriteria,
    UserRole,
    UserStatus,
)

__all__ = [
    "DuplicateEmailError",
    "Email",
    "InvalidEmailError",
    "User",
    "UserCriteria",
    "UserEvent",
    "UserEventType",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "UserStatus",
]
