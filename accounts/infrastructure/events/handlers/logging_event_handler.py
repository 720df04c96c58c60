"""Logging event handler for account domain events.

Structured logging for every account and session event.

Log Levels:
    - INFO: successful operations
    - WARNING: rejected logins, refreshes and token redemptions

Usage:
    >>> handler = LoggingEventHandler(logger=get_logger())
    >>> handler.register(event_bus)
"""

from accounts.domain.events.account_events import (
    AccountEmailSent,
    AllSessionsInvalidated,
    SessionInvalidated,
    SingleUseTokenIssued,
    SingleUseTokenRejected,
    TokenRefreshFailed,
    TokensRefreshed,
    UserCreated,
    UserEmailVerified,
    UserLoginFailed,
    UserLoginSucceeded,
    UserPasswordChanged,
)
from accounts.domain.protocols.event_bus_protocol import EventBusProtocol
from accounts.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of account events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def register(self, event_bus: EventBusProtocol) -> None:
        """Subscribe every handler method to its event type."""
        event_bus.subscribe(UserLoginSucceeded, self.handle_login_succeeded)
        event_bus.subscribe(UserLoginFailed, self.handle_login_failed)
        event_bus.subscribe(UserCreated, self.handle_user_created)
        event_bus.subscribe(UserPasswordChanged, self.handle_password_changed)
        event_bus.subscribe(UserEmailVerified, self.handle_email_verified)
        event_bus.subscribe(TokensRefreshed, self.handle_tokens_refreshed)
        event_bus.subscribe(TokenRefreshFailed, self.handle_token_refresh_failed)
        event_bus.subscribe(SessionInvalidated, self.handle_session_invalidated)
        event_bus.subscribe(
            AllSessionsInvalidated, self.handle_all_sessions_invalidated
        )
        event_bus.subscribe(SingleUseTokenIssued, self.handle_token_issued)
        event_bus.subscribe(SingleUseTokenRejected, self.handle_token_rejected)
        event_bus.subscribe(AccountEmailSent, self.handle_email_sent)

    # =========================================================================
    # Login
    # =========================================================================

    async def handle_login_succeeded(self, event: UserLoginSucceeded) -> None:
        self._logger.info(
            "user_login_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=event.user_id,
            session_id=event.session_id,
            ip_address=event.ip_address,
        )

    async def handle_login_failed(self, event: UserLoginFailed) -> None:
        self._logger.warning(
            "user_login_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            identifier=event.identifier,
            error_code=event.reason,
        )

    # =========================================================================
    # Users
    # =========================================================================

    async def handle_user_created(self, event: UserCreated) -> None:
        self._logger.info(
            "user_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=event.user_id,
            username=event.username,
            email=event.email,
        )

    async def handle_password_changed(self, event: UserPasswordChanged) -> None:
        self._logger.info(
            "user_password_changed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=event.user_id,
            via_token=event.via_token,
        )

    async def handle_email_verified(self, event: UserEmailVerified) -> None:
        self._logger.info(
            "user_email_verified",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=event.user_id,
            address=event.address,
        )

    # =========================================================================
    # Sessions and tokens
    # =========================================================================

    async def handle_tokens_refreshed(self, event: TokensRefreshed) -> None:
        self._logger.info(
            "tokens_refreshed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=event.user_id,
            session_id=event.session_id,
        )

    async def handle_token_refresh_failed(self, event: TokenRefreshFailed) -> None:
        self._logger.warning(
            "token_refresh_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            session_id=event.session_id,
            error_code=event.reason,
        )

    async def handle_session_invalidated(self, event: SessionInvalidated) -> None:
        self._logger.info(
            "session_invalidated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            session_id=event.session_id,
            user_id=event.user_id,
            reason=event.reason,
        )

    async def handle_all_sessions_invalidated(
        self, event: AllSessionsInvalidated
    ) -> None:
        self._logger.info(
            "all_sessions_invalidated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=event.user_id,
            reason=event.reason,
        )

    # =========================================================================
    # Single-use tokens and email
    # =========================================================================

    async def handle_token_issued(self, event: SingleUseTokenIssued) -> None:
        self._logger.info(
            "single_use_token_issued",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=event.user_id,
            address=event.address,
            purpose=event.purpose,
            token_prefix=event.token_prefix,
        )

    async def handle_token_rejected(self, event: SingleUseTokenRejected) -> None:
        self._logger.warning(
            "single_use_token_rejected",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            purpose=event.purpose,
            error_code=event.reason,
            token_prefix=event.token_prefix,
        )

    async def handle_email_sent(self, event: AccountEmailSent) -> None:
        self._logger.info(
            "account_email_sent",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=event.user_id,
            address=event.address,
            purpose=event.purpose,
        )
