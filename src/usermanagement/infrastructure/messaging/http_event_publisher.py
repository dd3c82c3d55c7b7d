"""HTTP publisher for user change events."""

from __future__ import annotations

import asyncio
import logging
from typing import Set

import httpx

from usermanagement.application.ports import UserEventPublisher
from usermanagement.domain.user.events import UserEvent

logger = logging.getLogger(__name__)

# Store references to fire-and-forget tasks to prevent garbage collection
_background_tasks: Set[asyncio.Task] = set()

# Kafka REST proxy v2 JSON embedded format
KAFKA_JSON_CONTENT_TYPE = "application/vnd.kafka.json.v2+json"


class HttpUserEventPublisher(UserEventPublisher):
    """Publishes user events to a topic behind a Kafka-REST-style endpoint.

    ``publish`` schedules delivery on a detached task and returns at once.
    Delivery failures are logged and dropped.
    """

    def __init__(
        self,
        base_url: str,
        topic: str,
        timeout: float = 10.0,
        enabled: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._topic = topic
        self._timeout = timeout
        self._enabled = enabled
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def topic(self) -> str:
        return self._topic

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={
                    "Content-Type": KAFKA_JSON_CONTENT_TYPE,
                    "Accept": "application/json",
                },
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def send(self, event: UserEvent) -> bool:
        """Deliver one event and wait for the outcome.

        Returns True when the channel accepted the event.
        """
        if not self._enabled:
            return False
        body = {"records": [{"key": event.key, "value": event.to_dict()}]}
        try:
            client = await self._get_client()
            response = await client.post(f"/topics/{self._topic}", json=body)
            response.raise_for_status()
            return True
        except httpx.ConnectError as e:
            logger.warning("Event channel connection failed: %s", e)
            return False
        except httpx.TimeoutException as e:
            logger.warning("Event channel timeout: %s", e)
            return False
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Event channel returned error %d: %s",
                e.response.status_code,
                e.response.text[:200] if e.response.text else "no body",
            )
            return False
        except Exception as e:
            logger.warning(
                "Failed to send user event (%s): %s",
                type(e).__name__,
                e,
            )
            return False

    def publish(self, event: UserEvent) -> None:
        """Send event without waiting for response (fire-and-forget)."""
        if not self._enabled:
            logger.debug(
                "Event channel disabled, dropping %s for user=%s",
                event.event_type.value,
                event.user_id,
            )
            return

        logger.debug(
            "Publishing %s for user=%s to topic=%s (fire-and-forget)",
            event.event_type.value,
            event.user_id,
            self._topic,
        )

        async def _send():
            delivered = await self.send(event)
            if delivered:
                logger.info(
                    "User event sent successfully: %s for user: %s",
                    event.event_type.value,
                    event.user_id,
                )
            else:
                logger.error(
                    "Failed to send user event: %s for user: %s",
                    event.event_type.value,
                    event.user_id,
                )

        task = asyncio.create_task(_send())
        _background_tasks.add(task)
        task.add_done_callback(_background_tasks.discard)


async def drain_pending_events() -> None:
    """Wait for in-flight fire-and-forget deliveries (used on shutdown)."""
    if _background_tasks:
        await asyncio.gather(*list(_background_tasks), return_exceptions=True)
