"""User domain entity.

Pure business logic, no framework dependencies.

A user owns an ordered list of email records and, embedded in the same
record, the single-use tokens issued against those addresses. The password
hash is deliberately NOT part of the entity: storage keeps it and exposes it
only through ``UserRepository.find_password_hash``.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from accounts.domain.enums import TokenPurpose


@dataclass(slots=True, kw_only=True)
class EmailRecord:
    """One address in a user's email set.

    Attributes:
        address: Email address (lower-cased on write).
        verified: Whether the address has been verified.
    """

    address: str
    verified: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class SingleUseToken:
    """Single-use token record embedded under a user.

    Attributes:
        token: Random hex string delivered in a link.
        address: Address the token was issued for.
        purpose: What redeeming the token does.
        created_at: Issue time (UTC), used for expiry checks.
    """

    token: str
    address: str
    purpose: TokenPurpose
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_expired(self, lifetime_seconds: int, now: datetime | None = None) -> bool:
        """Check whether the token is older than ``lifetime_seconds``."""
        now = now or datetime.now(UTC)
        return (now - self.created_at).total_seconds() > lifetime_seconds


@dataclass(slots=True, kw_only=True)
class User:
    """User domain entity.

    Business Rules:
        - Username and every email address are unique across users
        - Identity fields are never mutated by this package
        - A single-use token's address must be in ``emails`` at issue time

    Attributes:
        id: Opaque unique identifier.
        username: Optional unique username.
        emails: Ordered email records.
        profile: Free-form profile document.
        verification_tokens: Outstanding email verification tokens.
        reset_tokens: Outstanding reset-password and enrollment tokens.
        created_at: Creation timestamp.

    Example:
        >>> user = User(id="u1", username="ann", emails=[EmailRecord(address="ann@x.com")])
        >>> user.has_email("ann@x.com")
        True
        >>> user.first_unverified_email()
        'ann@x.com'
    """

    id: str
    username: str | None = None
    emails: list[EmailRecord] = field(default_factory=list)
    profile: dict[str, Any] = field(default_factory=dict)
    verification_tokens: list[SingleUseToken] = field(default_factory=list)
    reset_tokens: list[SingleUseToken] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def has_email(self, address: str) -> bool:
        """True if ``address`` is in the user's email set."""
        return any(record.address == address for record in self.emails)

    def first_email(self) -> str | None:
        """Return the first address, or None when the user has none."""
        return self.emails[0].address if self.emails else None

    def first_unverified_email(self) -> str | None:
        """Return the first address not yet verified, if any."""
        for record in self.emails:
            if not record.verified:
                return record.address
        return None

    def find_verification_token(self, token: str) -> SingleUseToken | None:
        """Return the first verification record matching ``token`` exactly."""
        for record in self.verification_tokens:
            if record.token == token:
                return record
        return None

    def find_reset_token(self, token: str) -> SingleUseToken | None:
        """Return the first reset/enroll record matching ``token`` exactly."""
        for record in self.reset_tokens:
            if record.token == token:
                return record
        return None
