"""SQLAlchemy persistence for the user domain."""

from usermanagement.infrastructure.persistence.sqlalchemy.models import Base, UserModel
from usermanagement.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
