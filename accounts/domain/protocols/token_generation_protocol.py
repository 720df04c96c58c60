"""Token codec protocol.

Signs and verifies the access and refresh tokens handed to callers.
Verification never raises; it returns a Result.
"""

from typing import Any, Protocol

from accounts.domain.value_objects.token_pair import TokenPair
from accounts.core.result import Result


class TokenGenerationProtocol(Protocol):
    """Access/refresh token codec interface.

    Implementations:
        - JWTService: PyJWT, HMAC by default
    """

    def issue_access_token(self, session_id: str) -> str:
        """Sign an access token carrying ``session_id`` and an expiry."""
        ...

    def issue_refresh_token(self) -> str:
        """Sign a refresh token carrying only an expiry."""
        ...

    def create_tokens(self, session_id: str) -> TokenPair:
        """Mint a fresh access/refresh pair for ``session_id``."""
        ...

    def verify(
        self, token: str, *, ignore_expiration: bool = False
    ) -> Result[dict[str, Any], str]:
        """Verify signature (and expiry unless ignored) and return the payload."""
        ...
