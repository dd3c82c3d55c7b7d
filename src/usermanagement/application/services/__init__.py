"""Application layer services."""

from usermanagement.application.services.user_service import UserService

__all__ = ["UserService"]
