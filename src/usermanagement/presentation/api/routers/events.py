"""Inbound delivery of user change events."""

import logging
from typing import Any

from fastapi import APIRouter, Body, status

from usermanagement.presentation.api.dependencies import EventConsumer
from usermanagement.presentation.api.schemas import EventAcceptedResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events")


@router.post(
    "/users",
    status_code=status.HTTP_202_ACCEPTED,
    summary="Deliver a user change event",
)
async def receive_user_event(
    consumer: EventConsumer,
    message: Any = Body(...),
) -> EventAcceptedResponse:
    """Hand one event message to the consumer.

    Always answers 202. Malformed messages are logged and dropped, which
    is reported as ``accepted: false``.
    """
    if not isinstance(message, dict):
        message = str(message)
    event = await consumer.consume(message)
    if event is None:
        return EventAcceptedResponse(accepted=False)
    return EventAcceptedResponse(
        accepted=True,
        event_type=event.event_type,
        user_id=event.user_id,
    )
