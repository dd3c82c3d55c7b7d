"""Value objects for the user domain."""

from usermanagement.domain.user.value_objects.email import Email
from usermanagement.domain.user.value_objects.user_criteria import UserCriteria
from usermanagement.domain.user.value_objects.user_role import UserRole
from usermanagement.domain.user.value_objects.user_status import UserStatus

__all__ = [
    "Email",
    "UserCriteria",
    "UserRole",
    "UserStatus",
]
