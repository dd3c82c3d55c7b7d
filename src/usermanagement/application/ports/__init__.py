"""Ports (interfaces) implemented by the infrastructure layer."""

from usermanagement.application.ports.user_event_publisher import UserEventPublisher

__all__ = ["UserEventPublisher"]
