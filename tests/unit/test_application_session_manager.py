"""Unit tests for SessionManager.

Tests cover:
- Resolving a session from an access token
- Refresh: token checks, invalidated sessions, missing owners, success path
- Invalidation (single and bulk) and the events it emits

Architecture:
- Mocked repositories, token codec and event bus
"""

from unittest.mock import AsyncMock, Mock

import pytest

from accounts.application.dtos import LoginResult
from accounts.application.services import SessionManager
from accounts.core.enums import ErrorCode
from accounts.core.result import Failure, Success
from accounts.domain.entities import Session, User
from accounts.domain.errors import AuthenticationError
from accounts.domain.events import (
    AllSessionsInvalidated,
    SessionInvalidated,
    TokenRefreshFailed,
    TokensRefreshed,
)
from accounts.domain.value_objects import TokenPair

ACCESS_PAYLOAD = {"data": {"session_id": "s1"}, "iat": 0, "exp": 1}


@pytest.fixture
def session_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_id.return_value = Session(id="s1", user_id="u1")
    repo.create.return_value = "s1"
    return repo


@pytest.fixture
def user_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_id.return_value = User(id="u1", username="ann")
    return repo


@pytest.fixture
def token_service() -> Mock:
    service = Mock()
    service.verify.return_value = Success(value=ACCESS_PAYLOAD)
    service.create_tokens.return_value = TokenPair(
        access_token="new-access", refresh_token="new-refresh"
    )
    return service


@pytest.fixture
def event_bus() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def manager(session_repo, user_repo, token_service, event_bus) -> SessionManager:
    return SessionManager(
        session_repo=session_repo,
        user_repo=user_repo,
        token_service=token_service,
        event_bus=event_bus,
    )


def published(event_bus: AsyncMock) -> list:
    return [call.args[0] for call in event_bus.publish.call_args_list]


@pytest.mark.unit
class TestResolveFromAccessToken:
    async def test_returns_session(self, manager, token_service):
        result = await manager.resolve_from_access_token("access")

        assert isinstance(result, Success)
        assert result.value.id == "s1"
        token_service.verify.assert_called_once_with("access")

    @pytest.mark.parametrize("token", [None, "", 42])
    async def test_non_string_token_is_invalid(self, manager, token):
        result = await manager.resolve_from_access_token(token)

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.TOKENS_INVALID

    async def test_verification_failure_is_tokens_invalid(self, manager, token_service):
        token_service.verify.return_value = Failure(error=AuthenticationError.EXPIRED_TOKEN)

        result = await manager.resolve_from_access_token("expired")

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.TOKENS_INVALID

    async def test_missing_session_claim_is_tokens_invalid(self, manager, token_service):
        # A refresh token verifies but carries no session id.
        token_service.verify.return_value = Success(value={"exp": 1, "jti": "j"})

        result = await manager.resolve_from_access_token("refresh-token")

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.TOKENS_INVALID

    async def test_unknown_session(self, manager, session_repo):
        session_repo.find_by_id.return_value = None

        result = await manager.resolve_from_access_token("access")

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.SESSION_NOT_FOUND


@pytest.mark.unit
class TestRefresh:
    async def test_refresh_success(self, manager, session_repo, token_service, event_bus):
        result = await manager.refresh("access", "refresh", "10.0.0.1", "curl/8")

        assert isinstance(result, Success)
        assert isinstance(result.value, LoginResult)
        assert result.value.session_id == "s1"
        assert result.value.tokens.access_token == "new-access"
        token_service.create_tokens.assert_called_once_with("s1")
        session_repo.update.assert_awaited_once_with("s1", "10.0.0.1", "curl/8")
        assert any(isinstance(e, TokensRefreshed) for e in published(event_bus))

    async def test_access_token_expiry_is_ignored(self, manager, token_service):
        await manager.refresh("access", "refresh")

        token_service.verify.assert_any_call("refresh")
        token_service.verify.assert_any_call("access", ignore_expiration=True)

    async def test_invalid_refresh_token(self, manager, token_service, session_repo, event_bus):
        def verify(token, *, ignore_expiration=False):
            if token == "refresh":
                return Failure(error=AuthenticationError.EXPIRED_TOKEN)
            return Success(value=ACCESS_PAYLOAD)

        token_service.verify.side_effect = verify

        result = await manager.refresh("access", "refresh")

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.TOKENS_INVALID
        session_repo.find_by_id.assert_not_called()
        failed = [e for e in published(event_bus) if isinstance(e, TokenRefreshFailed)]
        assert failed[0].reason == "tokens_invalid"

    async def test_non_string_tokens_are_malformed(self, manager):
        result = await manager.refresh(None, "refresh")

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.MALFORMED_REQUEST

    async def test_invalidated_session(self, manager, session_repo, token_service):
        session_repo.find_by_id.return_value = Session(id="s1", user_id="u1", valid=False)

        result = await manager.refresh("access", "refresh")

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.SESSION_INVALIDATED
        token_service.create_tokens.assert_not_called()

    async def test_missing_owner(self, manager, user_repo):
        user_repo.find_by_id.return_value = None

        result = await manager.refresh("access", "refresh")

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.USER_NOT_FOUND


@pytest.mark.unit
class TestInvalidate:
    async def test_invalidate_existing_session(self, manager, session_repo, event_bus):
        result = await manager.invalidate("s1")

        assert isinstance(result, Success)
        session_repo.invalidate.assert_awaited_once_with("s1")
        events = published(event_bus)
        assert isinstance(events[0], SessionInvalidated)
        assert events[0].reason == "logout"

    async def test_invalidate_unknown_session(self, manager, session_repo):
        session_repo.find_by_id.return_value = None

        result = await manager.invalidate("missing")

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.SESSION_NOT_FOUND
        session_repo.invalidate.assert_not_called()

    async def test_invalidate_all(self, manager, session_repo, event_bus):
        await manager.invalidate_all("u1", reason="password_reset")

        session_repo.invalidate_all_for_user.assert_awaited_once_with("u1")
        event = published(event_bus)[0]
        assert isinstance(event, AllSessionsInvalidated)
        assert event.reason == "password_reset"

    async def test_create_session_delegates_to_storage(self, manager, session_repo):
        session_id = await manager.create_session("u1", "10.0.0.1", None)

        assert session_id == "s1"
        session_repo.create.assert_awaited_once_with("u1", "10.0.0.1", None)
