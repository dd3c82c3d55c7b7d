"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from usermanagement.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """
    Raised when email format is invalid.

    This exception is raised during Email value object creation
    when the provided string doesn't match expected email format.

    Attributes
    ----------
    message
        Error description
    """

    def __init__(self, message: str) -> None:
        """
        Initialize the exception.

        Parameters
        ----------
        message
            Error message describing the validation failure
        """
        super().__init__(message, code=ErrorCode.INVALID_FORMAT)


class DuplicateEmailError(ConflictError):
    """Email already used by another user."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"User with email {email} already exists",
            code=ErrorCode.DUPLICATE_EMAIL,
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(
            f"User not found with id: {user_id}",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )
