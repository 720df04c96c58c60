"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture. The storage collaborator
implements it; this package only calls the operations listed here.

Every mutating method is atomic with respect to a single user record.
"""

from collections.abc import Iterable
from typing import Any, Protocol

from accounts.domain.entities.user import User
from accounts.domain.enums import TokenPurpose


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Example Implementation:
        >>> class MongoUserRepository:
        ...     async def find_by_username(self, username: str) -> User | None:
        ...         # Database logic here
        ...         pass
    """

    async def find_by_id(self, user_id: str) -> User | None:
        """Find user by id."""
        ...

    async def find_by_username(self, username: str) -> User | None:
        """Find user by username (exact match)."""
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user owning ``email`` (case-insensitive)."""
        ...

    async def find_by_email_verification_token(self, token: str) -> User | None:
        """Find the user holding an email verification record for ``token``."""
        ...

    async def find_by_reset_password_token(self, token: str) -> User | None:
        """Find the user holding a reset-password or enroll record for ``token``."""
        ...

    async def save(self, user: User, password_hash: str | None = None) -> None:
        """Create new user.

        Args:
            user: User entity to persist.
            password_hash: Hash of the initial password, if any.
        """
        ...

    async def find_password_hash(self, user_id: str) -> str | None:
        """Return the stored password hash, or None when no password is set."""
        ...

    async def set_password(self, user_id: str, password_hash: str) -> None:
        """Replace the user's password hash."""
        ...

    async def set_reset_password(
        self, user_id: str, address: str, password_hash: str, token: str
    ) -> bool:
        """Set a new password and delete the redeemed reset token in one write.

        The write is conditional: nothing changes unless the token record is
        still present, so concurrent redemptions of one token succeed once.

        Args:
            user_id: Owner of the token.
            address: Address the token was issued for.
            password_hash: Hash of the new password.
            token: Reset/enroll token being consumed.

        Returns:
            True if the token was consumed by this call, False otherwise.
        """
        ...

    async def add_email(self, user_id: str, address: str, verified: bool) -> None:
        """Append an address to the user's email set."""
        ...

    async def remove_email(self, user_id: str, address: str) -> None:
        """Remove an address from the user's email set."""
        ...

    async def verify_email(self, user_id: str, address: str, token: str) -> bool:
        """Mark ``address`` verified and delete the redeemed verification token.

        Conditional like ``set_reset_password``.

        Returns:
            True if the token was consumed by this call, False otherwise.
        """
        ...

    async def set_profile(self, user_id: str, profile: dict[str, Any]) -> None:
        """Replace the user's profile document."""
        ...

    async def add_email_verification_token(
        self, user_id: str, address: str, token: str
    ) -> None:
        """Record an email verification token under the user."""
        ...

    async def add_reset_password_token(
        self, user_id: str, address: str, token: str, purpose: TokenPurpose
    ) -> None:
        """Record a reset-password or enroll token under the user."""
        ...

    async def remove_tokens(self, user_id: str, tokens: Iterable[str]) -> None:
        """Delete the given verification and reset/enroll token records."""
        ...
