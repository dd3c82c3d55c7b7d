"""Event publisher port for application layer.

This abstracts the event channel, allowing the application layer to
remain independent of transport details like HTTP clients or brokers.
"""

from abc import ABC, abstractmethod

from usermanagement.domain.user.events import UserEvent


class UserEventPublisher(ABC):
    """Best-effort, non-blocking publisher of user change events."""

    @abstractmethod
    def publish(self, event: UserEvent) -> None:
        """Schedule delivery of the event and return immediately.

        Implementations never raise delivery failures to the caller and
        never wait for delivery to finish.
        """

    @abstractmethod
    async def close(self) -> None:
        """Release transport resources."""
