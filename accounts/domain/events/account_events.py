"""Account and session lifecycle events.

Events never carry passwords, hashes or full tokens. Where a token must be
referenced it is truncated to its first characters.
"""

from dataclasses import dataclass

from accounts.domain.events.base_event import DomainEvent


# =============================================================================
# Login
# =============================================================================


@dataclass(frozen=True, kw_only=True, slots=True)
class UserLoginSucceeded(DomainEvent):
    """Credentials accepted and a session was created."""

    user_id: str
    session_id: str
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True, slots=True)
class UserLoginFailed(DomainEvent):
    """Credentials rejected.

    Attributes:
        identifier: Echo of the login identifier (never the password).
        reason: ErrorCode value.
    """

    identifier: str | None
    reason: str


# =============================================================================
# Users
# =============================================================================


@dataclass(frozen=True, kw_only=True, slots=True)
class UserCreated(DomainEvent):
    """New user persisted."""

    user_id: str
    username: str | None = None
    email: str | None = None


@dataclass(frozen=True, kw_only=True, slots=True)
class UserPasswordChanged(DomainEvent):
    """Password replaced through set_password or a reset/enroll link."""

    user_id: str
    via_token: bool = False


@dataclass(frozen=True, kw_only=True, slots=True)
class UserEmailVerified(DomainEvent):
    """Address marked verified after a verification link was redeemed."""

    user_id: str
    address: str


# =============================================================================
# Sessions and tokens
# =============================================================================


@dataclass(frozen=True, kw_only=True, slots=True)
class TokensRefreshed(DomainEvent):
    """A new access/refresh pair was minted for an existing session."""

    user_id: str
    session_id: str


@dataclass(frozen=True, kw_only=True, slots=True)
class TokenRefreshFailed(DomainEvent):
    """Refresh rejected (bad tokens, unknown or invalid session)."""

    reason: str
    session_id: str | None = None


@dataclass(frozen=True, kw_only=True, slots=True)
class SessionInvalidated(DomainEvent):
    """One session invalidated (logout or explicit invalidation)."""

    session_id: str
    user_id: str
    reason: str


@dataclass(frozen=True, kw_only=True, slots=True)
class AllSessionsInvalidated(DomainEvent):
    """Every session of a user invalidated (password reset)."""

    user_id: str
    reason: str


# =============================================================================
# Single-use tokens
# =============================================================================


@dataclass(frozen=True, kw_only=True, slots=True)
class SingleUseTokenIssued(DomainEvent):
    """Single-use token recorded for (user, address, purpose)."""

    user_id: str
    address: str
    purpose: str
    token_prefix: str


@dataclass(frozen=True, kw_only=True, slots=True)
class SingleUseTokenRejected(DomainEvent):
    """Redemption attempt failed."""

    purpose: str
    reason: str
    token_prefix: str


@dataclass(frozen=True, kw_only=True, slots=True)
class AccountEmailSent(DomainEvent):
    """Mail collaborator accepted an account email."""

    user_id: str
    address: str
    purpose: str
