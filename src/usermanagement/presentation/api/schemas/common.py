"""Common schemas shared across API endpoints."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


def _utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


class FieldErrorResponse(BaseModel):
    """A single invalid request field."""

    field: str = Field(..., description="Dotted path of the invalid field")
    message: str = Field(..., description="Why the value was rejected")


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")
    errors: list[FieldErrorResponse] | None = Field(
        None,
        description="Per-field validation errors",
    )
    timestamp: datetime = Field(
        default_factory=_utc_now,
        description="When the error occurred",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"detail": "User not found with id: 42", "code": "USER_NOT_FOUND"},
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    timestamp: datetime = Field(default_factory=_utc_now)
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="API version")
