"""SQLAlchemy models for persistence layer."""

from usermanagement.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from usermanagement.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "UserModel",
]
