"""Event bus dependency factory.

Application-scoped singleton for domain event publishing, with the
logging handler subscribed at creation.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from accounts.core.config import Settings

if TYPE_CHECKING:
    from accounts.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus(settings: Settings | None = None) -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Usage:
        event_bus = get_event_bus()
        await event_bus.publish(UserCreated(user_id=user.id))
    """
    from accounts.core.container.infrastructure import get_logger
    from accounts.infrastructure.events import InMemoryEventBus
    from accounts.infrastructure.events.handlers import LoggingEventHandler

    logger = get_logger(settings).bind(component="event_bus")
    event_bus = InMemoryEventBus(logger=logger)
    LoggingEventHandler(logger=logger).register(event_bus)
    return event_bus
