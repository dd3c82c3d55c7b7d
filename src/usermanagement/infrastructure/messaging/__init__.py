"""Event channel adapters."""

from usermanagement.infrastructure.messaging.http_event_publisher import (
    HttpUserEventPublisher,
    drain_pending_events,
)
from usermanagement.infrastructure.messaging.user_event_consumer import (
    UserEventConsumer,
    UserEventMessage,
)

__all__ = [
    "HttpUserEventPublisher",
    "UserEventConsumer",
    "UserEventMessage",
    "drain_pending_events",
]
