"""Single-use token generation protocol.

Produces the random strings embedded in verification, reset and
enrollment links and owns the lifetime policy per purpose.
"""

from typing import Protocol

from accounts.domain.enums import TokenPurpose


class SingleUseTokenProtocol(Protocol):
    """Single-use token generator interface.

    Implementations:
        - SingleUseTokenService: secrets.token_hex, 256 bits
    """

    def generate_token(self) -> str:
        """Return a new unguessable token (at least 128 bits of entropy)."""
        ...

    def lifetime_seconds(self, purpose: TokenPurpose) -> int:
        """Return how long a token of ``purpose`` stays redeemable."""
        ...
