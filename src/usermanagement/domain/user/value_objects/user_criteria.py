"""Filter predicate for user queries."""

from dataclasses import dataclass
from typing import Optional

from usermanagement.domain.user.value_objects.user_role import UserRole
from usermanagement.domain.user.value_objects.user_status import UserStatus


@dataclass(frozen=True)
class UserCriteria:
    """Exact-match filter on categorical user fields.

    Fields left as None are not constrained. An empty criteria matches
    every user.
    """

    role: Optional[UserRole] = None
    status: Optional[UserStatus] = None
    city: Optional[str] = None
    country: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return (
            self.role is None
            and self.status is None
            and self.city is None
            and self.country is None
        )
