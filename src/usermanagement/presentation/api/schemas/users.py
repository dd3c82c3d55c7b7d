"""User request/response schemas."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from usermanagement.application.dtos import (
    PageDTO,
    UserDTO,
    UserInputDTO,
    UserStatisticsDTO,
)
from usermanagement.domain.user import UserRole, UserStatus

PHONE_PATTERN = r"^[+]?[0-9]{10,20}$"
EMAIL_MAX_LENGTH = 150


class UserSortField(str, Enum):
    """Fields the user listing can be ordered by."""

    ID = "id"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    EMAIL = "email"
    CITY = "city"
    COUNTRY = "country"
    ROLE = "role"
    STATUS = "status"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


class UserRequest(BaseModel):
    """Request schema for creating or updating a user."""

    first_name: str = Field(..., min_length=2, max_length=100)
    last_name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    phone: str | None = Field(None, pattern=PHONE_PATTERN)
    address: str | None = Field(None, max_length=200)
    city: str | None = Field(None, max_length=100)
    country: str | None = Field(None, max_length=100)
    postal_code: str | None = Field(None, max_length=20)
    role: UserRole
    status: UserStatus | None = None
    bio: str | None = Field(None, max_length=500)
    avatar_url: str | None = Field(None, max_length=200)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "first_name": "John",
                "last_name": "Doe",
                "email": "john@example.com",
                "phone": "+1234567890",
                "city": "Berlin",
                "country": "Germany",
                "role": "USER",
            },
        },
    )

    @field_validator("first_name", "last_name")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            msg = "must not be blank"
            raise ValueError(msg)
        return v

    @field_validator("email")
    @classmethod
    def _email_length(cls, v: str) -> str:
        if len(v) > EMAIL_MAX_LENGTH:
            msg = f"must not exceed {EMAIL_MAX_LENGTH} characters"
            raise ValueError(msg)
        return v

    def to_dto(self) -> UserInputDTO:
        return UserInputDTO(
            first_name=self.first_name,
            last_name=self.last_name,
            email=str(self.email),
            role=self.role,
            status=self.status,
            phone=self.phone,
            address=self.address,
            city=self.city,
            country=self.country,
            postal_code=self.postal_code,
            bio=self.bio,
            avatar_url=self.avatar_url,
        )


class UserResponse(BaseModel):
    """Response schema for a user record."""

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str | None
    address: str | None
    city: str | None
    country: str | None
    postal_code: str | None
    role: UserRole
    status: UserStatus
    bio: str | None
    avatar_url: str | None
    created_at: datetime | None
    updated_at: datetime | None
    last_login_at: datetime | None

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_dto(cls, dto: UserDTO) -> UserResponse:
        return cls.model_validate(dto)


class UserPageResponse(BaseModel):
    """Paginated list of users."""

    content: list[UserResponse] = Field(..., description="Users on this page")
    page_number: int = Field(..., description="Zero-based page index")
    page_size: int = Field(..., description="Requested page size")
    total_elements: int = Field(..., description="Total number of matching users")
    total_pages: int = Field(..., description="Total number of pages")
    first: bool
    last: bool
    empty: bool

    @classmethod
    def from_dto(cls, page: PageDTO[UserDTO]) -> UserPageResponse:
        return cls(
            content=[UserResponse.from_dto(u) for u in page.content],
            page_number=page.page_number,
            page_size=page.page_size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            first=page.first,
            last=page.last,
            empty=page.empty,
        )


class UserStatsResponse(BaseModel):
    """User counts per status and role."""

    active_users: int
    inactive_users: int
    suspended_users: int
    pending_users: int
    admins: int
    managers: int
    regular_users: int

    @classmethod
    def from_dto(cls, stats: UserStatisticsDTO) -> UserStatsResponse:
        return cls(**stats.to_dict())
