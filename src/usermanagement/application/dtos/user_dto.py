"""DTOs for user input and output."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from usermanagement.domain.user import User, UserRole, UserStatus


@dataclass(frozen=True)
class UserInputDTO:
    """Validated create/update request.

    Field constraints are enforced by the presentation layer before a
    request reaches the application layer.
    """

    first_name: str
    last_name: str
    email: str
    role: UserRole
    status: Optional[UserStatus] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None

    def field_values(self) -> dict[str, Any]:
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "role": self.role,
            "status": self.status,
            "phone": self.phone,
            "address": self.address,
            "city": self.city,
            "country": self.country,
            "postal_code": self.postal_code,
            "bio": self.bio,
            "avatar_url": self.avatar_url,
        }


@dataclass(frozen=True)
class UserDTO:
    """User record for presentation layer."""

    id: int
    first_name: str
    last_name: str
    email: str
    role: UserRole
    status: UserStatus
    phone: Optional[str]
    address: Optional[str]
    city: Optional[str]
    country: Optional[str]
    postal_code: Optional[str]
    bio: Optional[str]
    avatar_url: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    last_login_at: Optional[datetime]

    @classmethod
    def from_user(cls, user: User) -> UserDTO:
        if user.id is None:
            msg = "Cannot build a DTO for a user that was never persisted"
            raise ValueError(msg)
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            role=user.role,
            status=user.status,
            phone=user.phone,
            address=user.address,
            city=user.city,
            country=user.country,
            postal_code=user.postal_code,
            bio=user.bio,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
            updated_at=user.updated_at,
            last_login_at=user.last_login_at,
        )


@dataclass(frozen=True)
class UserStatisticsDTO:
    """User counts per status and per role."""

    by_status: dict[UserStatus, int]
    by_role: dict[UserRole, int]

    def to_dict(self) -> dict[str, int]:
        return {
            "active_users": self.by_status.get(UserStatus.ACTIVE, 0),
            "inactive_users": self.by_status.get(UserStatus.INACTIVE, 0),
            "suspended_users": self.by_status.get(UserStatus.SUSPENDED, 0),
            "pending_users": self.by_status.get(UserStatus.PENDING, 0),
            "admins": self.by_role.get(UserRole.ADMIN, 0),
            "managers": self.by_role.get(UserRole.MANAGER, 0),
            "regular_users": self.by_role.get(UserRole.USER, 0),
        }
