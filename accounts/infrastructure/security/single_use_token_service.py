"""Single-use token generation service.

Generates the random tokens embedded in verification, reset and enrollment
links, and knows how long each purpose stays redeemable.

Token Strategy:
    - 32-byte random hex string (64 characters, 256 bits of entropy)
    - Stored in plain text (already unguessable)
    - Deleted on redemption
"""

import secrets
from datetime import timedelta

from accounts.core.constants import TOKEN_BYTES
from accounts.domain.enums import TokenPurpose


class SingleUseTokenService:
    """Single-use token generation and lifetime policy.

    Usage:
        service = SingleUseTokenService(
            verification_lifetime=timedelta(hours=24),
            reset_lifetime=timedelta(minutes=60),
            enrollment_lifetime=timedelta(hours=72),
        )
        token = service.generate_token()
        service.lifetime_seconds(TokenPurpose.RESET_PASSWORD)  # 3600
    """

    def __init__(
        self,
        verification_lifetime: timedelta = timedelta(hours=24),
        reset_lifetime: timedelta = timedelta(minutes=60),
        enrollment_lifetime: timedelta = timedelta(hours=72),
    ) -> None:
        self._lifetimes = {
            TokenPurpose.VERIFY_EMAIL: verification_lifetime,
            TokenPurpose.RESET_PASSWORD: reset_lifetime,
            TokenPurpose.ENROLL: enrollment_lifetime,
        }

    def generate_token(self) -> str:
        """Generate a single-use token.

        Returns:
            64-character hex string (32 bytes of entropy).

        Example:
            >>> len(SingleUseTokenService().generate_token())
            64
        """
        return secrets.token_hex(TOKEN_BYTES)

    def lifetime_seconds(self, purpose: TokenPurpose) -> int:
        """Return how long a token of ``purpose`` stays redeemable."""
        return int(self._lifetimes[purpose].total_seconds())
