from enum import Enum


class UserRole(str, Enum):
    """Role of a user within the organisation."""

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    USER = "USER"
