"""Consumer for user change events delivered back by the event channel."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Union

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from usermanagement.domain.user import UserEventType, UserRole, UserStatus

logger = logging.getLogger(__name__)


class UserEventMessage(BaseModel):
    """Wire format of a user change event."""

    model_config = ConfigDict(extra="ignore")

    event_type: str
    user_id: int
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    role: UserRole | None = None
    status: UserStatus | None = None
    event_timestamp: str | None = None
    performed_by: str | None = None


Handler = Callable[[UserEventMessage], Awaitable[None]]


class UserEventConsumer:
    """Parses incoming event messages and dispatches them by event type.

    Errors are logged and swallowed so a bad message never stops the
    delivery loop.
    """

    def __init__(self) -> None:
        self._handlers: dict[UserEventType, Handler] = {
            UserEventType.USER_CREATED: self._on_created,
            UserEventType.USER_UPDATED: self._on_updated,
            UserEventType.USER_DELETED: self._on_deleted,
            UserEventType.USER_STATUS_CHANGED: self._on_status_changed,
        }

    async def consume(
        self,
        message: Union[str, bytes, dict],
    ) -> UserEventMessage | None:
        """Process one message. Returns the parsed event, or None if dropped."""
        try:
            if isinstance(message, dict):
                event = UserEventMessage.model_validate(message)
            else:
                event = UserEventMessage.model_validate_json(message)
        except PydanticValidationError as e:
            logger.error("Error processing user event: %s", e)
            return None

        logger.info(
            "Consumed user event: type=%s, userId=%s, email=%s",
            event.event_type,
            event.user_id,
            event.email,
        )

        try:
            event_type = UserEventType(event.event_type)
        except ValueError:
            logger.warning("Unknown event type: %s", event.event_type)
            return event

        try:
            await self._handlers[event_type](event)
        except Exception:
            logger.exception(
                "Handler for %s failed for user %s",
                event_type.value,
                event.user_id,
            )
        return event

    async def _on_created(self, event: UserEventMessage) -> None:
        logger.info("Processing USER_CREATED event for user: %s", event.user_id)

    async def _on_updated(self, event: UserEventMessage) -> None:
        logger.info("Processing USER_UPDATED event for user: %s", event.user_id)

    async def _on_deleted(self, event: UserEventMessage) -> None:
        logger.info("Processing USER_DELETED event for user: %s", event.user_id)

    async def _on_status_changed(self, event: UserEventMessage) -> None:
        logger.info(
            "Processing USER_STATUS_CHANGED event for user: %s (status=%s)",
            event.user_id,
            event.status.value if event.status else None,
        )
