"""Unit tests for the container factories.

Tests cover:
- Adapter selection from settings
- App-scoped caching (same settings -> same instance)
- build_accounts_server wiring and defaults
"""

from unittest.mock import patch

import pytest

from accounts.application import AccountsServer
from accounts.core.config import Settings
from accounts.core.container import (
    build_accounts_server,
    get_email_service,
    get_event_bus,
    get_logger,
    get_password_service,
    get_single_use_token_service,
    get_token_service,
)
from accounts.core.enums import Environment
from accounts.domain.enums import TokenPurpose
from accounts.infrastructure.email import StubEmailService
from accounts.infrastructure.events import InMemoryEventBus
from accounts.infrastructure.logging import ConsoleAdapter
from accounts.infrastructure.security import (
    BcryptPasswordService,
    JWTService,
    SingleUseTokenService,
)


@pytest.fixture
def container_settings() -> Settings:
    return Settings(
        environment=Environment.TESTING,
        token_secret="c" * 32,
        bcrypt_rounds=4,
        password_reset_token_expire_minutes=30,
    )


@pytest.mark.unit
class TestInfrastructureFactories:
    def test_logger_uses_json_outside_development(self, container_settings):
        with patch("accounts.infrastructure.logging.ConsoleAdapter") as mock_adapter:
            get_logger.cache_clear()
            get_logger(container_settings)

        mock_adapter.assert_called_once_with(use_json=True, level="INFO")
        get_logger.cache_clear()

    def test_logger_is_console_adapter(self, container_settings):
        assert isinstance(get_logger(container_settings), ConsoleAdapter)

    def test_factories_return_expected_adapters(self, container_settings):
        assert isinstance(get_password_service(container_settings), BcryptPasswordService)
        assert isinstance(get_token_service(container_settings), JWTService)
        assert isinstance(get_email_service(container_settings), StubEmailService)
        assert isinstance(
            get_single_use_token_service(container_settings), SingleUseTokenService
        )

    def test_single_use_lifetimes_follow_settings(self, container_settings):
        service = get_single_use_token_service(container_settings)

        assert service.lifetime_seconds(TokenPurpose.RESET_PASSWORD) == 30 * 60
        assert service.lifetime_seconds(TokenPurpose.VERIFY_EMAIL) == 24 * 3600
        assert service.lifetime_seconds(TokenPurpose.ENROLL) == 72 * 3600

    @pytest.mark.parametrize(
        ("factory", "component"),
        [(get_email_service, "email"), (get_event_bus, "event_bus")],
    )
    def test_component_loggers_are_bound(self, container_settings, factory, component):
        with patch("accounts.core.container.infrastructure.get_logger") as mock_get_logger:
            factory.cache_clear()
            service = factory(container_settings)

        mock_get_logger.return_value.bind.assert_called_once_with(component=component)
        assert service._logger is mock_get_logger.return_value.bind.return_value
        factory.cache_clear()

    def test_factories_are_cached_per_settings(self, container_settings):
        assert get_token_service(container_settings) is get_token_service(
            container_settings
        )


@pytest.mark.unit
class TestEventBusFactory:
    def test_event_bus_has_logging_subscriptions(self, container_settings):
        bus = get_event_bus(container_settings)

        assert isinstance(bus, InMemoryEventBus)
        assert bus is get_event_bus(container_settings)


@pytest.mark.unit
class TestBuildAccountsServer:
    def test_builds_server_with_defaults(self, container_settings):
        server = build_accounts_server(container_settings)

        assert isinstance(server, AccountsServer)

    def test_separate_builds_do_not_share_storage(self, container_settings):
        first = build_accounts_server(container_settings)
        second = build_accounts_server(container_settings)

        assert first._user_repo is not second._user_repo
