"""Shared pytest fixtures.

Fixtures build every component explicitly from a test Settings instance
(bcrypt cost 4, fixed secret) so tests never depend on ACCOUNTS_* env
vars or on the container's app-scoped singletons.
"""

from unittest.mock import MagicMock

import pytest

from accounts.core.config import Settings
from accounts.core.container import build_accounts_server
from accounts.core.enums import Environment
from accounts.infrastructure.email import StubEmailService
from accounts.infrastructure.events import InMemoryEventBus
from accounts.infrastructure.persistence import (
    MemorySessionRepository,
    MemoryUserRepository,
)

TEST_SECRET = "test-secret-key-0123456789abcdef-xyz"


@pytest.fixture
def settings() -> Settings:
    """Settings tuned for fast tests."""
    return Settings(
        environment=Environment.TESTING,
        token_secret=TEST_SECRET,
        bcrypt_rounds=4,
        site_url="http://localhost:3000/",
        email_from="accounts@example.com",
    )


@pytest.fixture
def mock_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def user_repo() -> MemoryUserRepository:
    return MemoryUserRepository()


@pytest.fixture
def session_repo() -> MemorySessionRepository:
    return MemorySessionRepository()


@pytest.fixture
def email_service(mock_logger) -> StubEmailService:
    return StubEmailService(logger=mock_logger)


@pytest.fixture
def event_bus(mock_logger) -> InMemoryEventBus:
    """Fresh bus per test (bypasses the app-scoped singleton)."""
    return InMemoryEventBus(logger=mock_logger)


@pytest.fixture
def server(settings, user_repo, session_repo, email_service, event_bus):
    """AccountsServer over in-memory storage and the stub mail service."""
    return build_accounts_server(
        settings,
        user_repo=user_repo,
        session_repo=session_repo,
        email_service=email_service,
        event_bus=event_bus,
    )
