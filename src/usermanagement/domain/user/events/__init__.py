"""Domain events for the user aggregate."""

from usermanagement.domain.user.events.user_event import (
    EVENT_TIMESTAMP_FORMAT,
    SYSTEM_ACTOR,
    UserEvent,
    UserEventType,
)

__all__ = [
    "EVENT_TIMESTAMP_FORMAT",
    "SYSTEM_ACTOR",
    "UserEvent",
    "UserEventType",
]
