"""Session lifecycle and token-pair management.

Sessions move one way: valid -> invalid. Every flow that starts from an
access token (logout, resume-session) resolves the session through
``resolve_from_access_token`` so token verification lives in one place.

Refresh flow:
1. Verify the refresh token fully and the access token ignoring expiry
2. Load the session named in the access token
3. Reject invalidated sessions and missing owners
4. Mint a fresh pair and record the caller's ip/user agent
5. Emit TokensRefreshed (or TokenRefreshFailed)
"""

from typing import Any

from accounts.application.dtos import LoginResult
from accounts.application.errors import fail
from accounts.core.enums import ErrorCode
from accounts.core.result import Failure, Result, Success
from accounts.domain.entities.session import Session
from accounts.domain.errors import AccountsError
from accounts.domain.events import (
    AllSessionsInvalidated,
    SessionInvalidated,
    TokenRefreshFailed,
    TokensRefreshed,
)
from accounts.domain.protocols import (
    EventBusProtocol,
    SessionRepository,
    TokenGenerationProtocol,
    UserRepository,
)
from accounts.domain.value_objects.token_pair import TokenPair


class SessionManager:
    """Create, resolve, refresh and invalidate sessions."""

    def __init__(
        self,
        session_repo: SessionRepository,
        user_repo: UserRepository,
        token_service: TokenGenerationProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        """Initialize session manager with dependencies.

        Args:
            session_repo: Session storage.
            user_repo: User storage (owner lookups during refresh).
            token_service: Access/refresh token codec.
            event_bus: Event bus for publishing domain events.
        """
        self._session_repo = session_repo
        self._user_repo = user_repo
        self._token_service = token_service
        self._event_bus = event_bus

    async def create_session(
        self,
        user_id: str,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> str:
        """Allocate a new valid session and return its id."""
        return await self._session_repo.create(user_id, ip_address, user_agent)

    def create_tokens(self, session_id: str) -> TokenPair:
        """Mint an access/refresh pair bound to ``session_id``."""
        return self._token_service.create_tokens(session_id)

    async def find_session(self, session_id: str) -> Result[Session, AccountsError]:
        session = await self._session_repo.find_by_id(session_id)
        if session is None:
            return fail(
                ErrorCode.SESSION_NOT_FOUND,
                "Session not found",
                {"session_id": session_id},
            )
        return Success(value=session)

    async def resolve_from_access_token(
        self, access_token: object
    ) -> Result[Session, AccountsError]:
        """Verify an access token (expiry enforced) and load its session.

        Returns:
            Success(session), which may be invalidated; callers decide.
            Failure with TOKENS_INVALID or SESSION_NOT_FOUND.
        """
        if not isinstance(access_token, str) or not access_token:
            return fail(ErrorCode.TOKENS_INVALID, "An access token is required")

        verified = self._token_service.verify(access_token)
        if isinstance(verified, Failure):
            return fail(ErrorCode.TOKENS_INVALID, "Tokens are not valid")

        session_id = _session_id_claim(verified.value)
        if session_id is None:
            return fail(ErrorCode.TOKENS_INVALID, "Tokens are not valid")

        return await self.find_session(session_id)

    async def refresh(
        self,
        access_token: object,
        refresh_token: object,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> Result[LoginResult, AccountsError]:
        """Exchange a (possibly expired) access token and a live refresh token.

        Args:
            access_token: Access token; its expiry is ignored.
            refresh_token: Refresh token; must be unexpired.
            ip_address: Caller's IP, recorded on the session.
            user_agent: Caller's user agent, recorded on the session.

        Returns:
            Success(LoginResult) with a fresh pair.
            Failure with MALFORMED_REQUEST, TOKENS_INVALID, SESSION_NOT_FOUND,
            SESSION_INVALIDATED or USER_NOT_FOUND.

        Side Effects:
            - Updates session ip/user agent (on success).
            - Publishes TokensRefreshed or TokenRefreshFailed.
        """
        if not isinstance(access_token, str) or not isinstance(refresh_token, str):
            return await self._refresh_failed(
                fail(
                    ErrorCode.MALFORMED_REQUEST,
                    "An access token and refresh token are required",
                )
            )

        refresh_check = self._token_service.verify(refresh_token)
        access_check = self._token_service.verify(
            access_token, ignore_expiration=True
        )
        if isinstance(refresh_check, Failure) or isinstance(access_check, Failure):
            return await self._refresh_failed(
                fail(ErrorCode.TOKENS_INVALID, "Tokens are not valid")
            )

        session_id = _session_id_claim(access_check.value)
        if session_id is None:
            return await self._refresh_failed(
                fail(ErrorCode.TOKENS_INVALID, "Tokens are not valid")
            )

        found = await self.find_session(session_id)
        if isinstance(found, Failure):
            return await self._refresh_failed(found, session_id)
        session = found.value

        if not session.valid:
            return await self._refresh_failed(
                fail(
                    ErrorCode.SESSION_INVALIDATED,
                    "Session is no longer valid",
                    {"session_id": session.id},
                ),
                session.id,
            )

        user = await self._user_repo.find_by_id(session.user_id)
        if user is None:
            return await self._refresh_failed(
                fail(ErrorCode.USER_NOT_FOUND, "User not found", {"id": session.user_id}),
                session.id,
            )

        tokens = self._token_service.create_tokens(session.id)
        await self._session_repo.update(session.id, ip_address, user_agent)

        await self._event_bus.publish(
            TokensRefreshed(user_id=user.id, session_id=session.id)
        )
        return Success(value=LoginResult(session_id=session.id, user=user, tokens=tokens))

    async def invalidate(
        self, session_id: str, reason: str = "logout"
    ) -> Result[None, AccountsError]:
        """Invalidate one session. Idempotent for existing sessions."""
        found = await self.find_session(session_id)
        if isinstance(found, Failure):
            return found

        await self._session_repo.invalidate(session_id)
        await self._event_bus.publish(
            SessionInvalidated(
                session_id=session_id,
                user_id=found.value.user_id,
                reason=reason,
            )
        )
        return Success(value=None)

    async def invalidate_all(self, user_id: str, reason: str) -> None:
        """Invalidate every session owned by ``user_id``."""
        await self._session_repo.invalidate_all_for_user(user_id)
        await self._event_bus.publish(
            AllSessionsInvalidated(user_id=user_id, reason=reason)
        )

    async def _refresh_failed(
        self,
        failure: Failure[AccountsError],
        session_id: str | None = None,
    ) -> Failure[AccountsError]:
        await self._event_bus.publish(
            TokenRefreshFailed(reason=failure.error.code.value, session_id=session_id)
        )
        return failure


def _session_id_claim(payload: dict[str, Any]) -> str | None:
    data = payload.get("data")
    if not isinstance(data, dict):
        return None
    session_id = data.get("session_id")
    return session_id if isinstance(session_id, str) and session_id else None
