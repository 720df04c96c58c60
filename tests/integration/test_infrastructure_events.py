"""Integration tests for the in-memory event bus with the logging handler.

Tests cover:
- Exact-type routing to subscribed handlers
- Fail-open: a failing handler does not stop the others or the publisher
- Logging handler wired through register()
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from accounts.domain.events import UserCreated, UserLoginFailed
from accounts.infrastructure.events import InMemoryEventBus
from accounts.infrastructure.events.handlers import LoggingEventHandler


@pytest.mark.integration
class TestInMemoryEventBus:
    async def test_publish_routes_by_exact_type(self, event_bus):
        created_handler = AsyncMock()
        failed_handler = AsyncMock()
        event_bus.subscribe(UserCreated, created_handler)
        event_bus.subscribe(UserLoginFailed, failed_handler)

        event = UserCreated(user_id="u1", username="ann")
        await event_bus.publish(event)

        created_handler.assert_awaited_once_with(event)
        failed_handler.assert_not_called()

    async def test_publish_without_handlers_is_noop(self, event_bus):
        await event_bus.publish(UserCreated(user_id="u1"))

    async def test_failing_handler_does_not_stop_others(self, event_bus, mock_logger):
        failing = AsyncMock(side_effect=RuntimeError("boom"))
        healthy = AsyncMock()
        event_bus.subscribe(UserCreated, failing)
        event_bus.subscribe(UserCreated, healthy)

        await event_bus.publish(UserCreated(user_id="u1"))

        healthy.assert_awaited_once()
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.args[0] == "event_handler_failed"
        assert mock_logger.warning.call_args.kwargs["error_message"] == "boom"


@pytest.mark.integration
async def test_logging_handler_receives_published_events():
    logger = MagicMock()
    bus = InMemoryEventBus(logger=logger)
    LoggingEventHandler(logger=logger).register(bus)

    await bus.publish(UserCreated(user_id="u1", username="ann", email="ann@x.com"))

    messages = [call.args[0] for call in logger.info.call_args_list]
    assert "user_created" in messages
