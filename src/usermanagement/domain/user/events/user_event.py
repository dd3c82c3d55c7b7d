"""Change events emitted after successful user mutations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from usermanagement.domain.shared.time import utc_now
from usermanagement.domain.user.aggregates.user import User
from usermanagement.domain.user.value_objects import UserRole, UserStatus

SYSTEM_ACTOR = "system"
EVENT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class UserEventType(str, Enum):
    """Kinds of user change events."""

    USER_CREATED = "USER_CREATED"
    USER_UPDATED = "USER_UPDATED"
    USER_DELETED = "USER_DELETED"
    USER_STATUS_CHANGED = "USER_STATUS_CHANGED"


@dataclass(frozen=True)
class UserEvent:
    """Snapshot of a user at the moment of a mutation.

    Built right after the write succeeds, handed to the publisher and
    then discarded.
    """

    event_type: UserEventType
    user_id: int
    email: str
    first_name: str
    last_name: str
    role: UserRole
    status: UserStatus
    event_timestamp: datetime = field(default_factory=utc_now)
    performed_by: str = SYSTEM_ACTOR

    @classmethod
    def from_user(cls, user: User, event_type: UserEventType) -> UserEvent:
        if user.id is None:
            msg = "Cannot build an event for a user that was never persisted"
            raise ValueError(msg)
        return cls(
            event_type=event_type,
            user_id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            status=user.status,
        )

    @property
    def key(self) -> str:
        """Partition key on the event channel."""
        return str(self.user_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type.value,
            "user_id": self.user_id,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "role": self.role.value,
            "status": self.status.value,
            "event_timestamp": self.event_timestamp.strftime(EVENT_TIMESTAMP_FORMAT),
            "performed_by": self.performed_by,
        }
