"""Domain events."""

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
from accounts.domain.events.base_event import DomainEvent

__all__ = [
    "AccountEmailSent",
    "AllSessionsInvalidated",
    "DomainEvent",
    "SessionInvalidated",
    "SingleUseTokenIssued",
    "SingleUseTokenRejected",
    "TokenRefreshFailed",
    "TokensRefreshed",
    "UserCreated",
    "UserEmailVerified",
    "UserLoginFailed",
    "UserLoginSucceeded",
    "UserPasswordChanged",
]
