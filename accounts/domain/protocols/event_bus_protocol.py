"""EventBusProtocol - publish/subscribe port for domain events.

Publishers (the orchestrator and its services) emit past-tense events;
subscribers (logging handler) react. Handler failures never propagate to
the publisher.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from accounts.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Requirements:
        - Fail-open: one handler failure must not stop the others.
        - Async handlers.
        - Exact type routing, no ordering guarantees.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register ``handler`` for events of exactly ``event_type``."""
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish ``event`` to every handler registered for its type."""
        ...
