"""Single-use token purposes.

A single-use token is scoped to exactly one (user, address, purpose).
Reset and enrollment tokens share the reset-token record list; both are
redeemed by setting a new password.
"""

from enum import Enum


class TokenPurpose(str, Enum):
    """Classification of a single-use token."""

    VERIFY_EMAIL = "verify-email"
    RESET_PASSWORD = "reset-password"
    ENROLL = "enroll"

    @property
    def sets_password(self) -> bool:
        """True for purposes redeemed by choosing a new password."""
        return self in (TokenPurpose.RESET_PASSWORD, TokenPurpose.ENROLL)
