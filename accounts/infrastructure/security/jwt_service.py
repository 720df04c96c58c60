"""JWT token codec (adapter).

Implements TokenGenerationProtocol using PyJWT.

Token shapes:
    access:  {"data": {"session_id": "<id>"}, "iat", "exp", "jti"}
    refresh: {"iat", "exp", "jti"}

The refresh token deliberately carries no session id: at refresh time the
session is recovered from the (possibly expired) access token presented
alongside it.

Security:
    - HMAC-SHA256 (HS256) by default, algorithm configurable
    - 256-bit secret key minimum
    - Unique JWT ID (jti) per token
"""

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt.exceptions import (
    DecodeError,
    ExpiredSignatureError,
    InvalidSignatureError,
    InvalidTokenError,
)
from uuid_extensions import uuid7

from accounts.core.constants import MIN_SECRET_BYTES
from accounts.core.result import Failure, Result, Success
from accounts.domain.errors import AuthenticationError
from accounts.domain.value_objects.token_pair import TokenPair


class JWTService:
    """Access/refresh token codec.

    Usage:
        service = JWTService(secret_key=settings.token_secret)
        tokens = service.create_tokens(session_id)

        match service.verify(tokens.access_token):
            case Success(value=payload):
                session_id = payload["data"]["session_id"]
            case Failure(error=error):
                ...
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        access_token_expire_minutes: int = 90,
        refresh_token_expire_days: int = 1,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Signing secret, at least 32 bytes.
            algorithm: JWT signing algorithm.
            access_token_expire_minutes: Access token lifetime.
            refresh_token_expire_days: Refresh token lifetime.

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key.encode("utf-8")) < MIN_SECRET_BYTES:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._algorithm = algorithm
        self._access_lifetime = timedelta(minutes=access_token_expire_minutes)
        self._refresh_lifetime = timedelta(days=refresh_token_expire_days)

    def issue_access_token(self, session_id: str) -> str:
        """Generate an access token bound to ``session_id``.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> len(service.issue_access_token("s1").split("."))
            3
        """
        payload = self._base_claims(self._access_lifetime)
        payload["data"] = {"session_id": session_id}
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def issue_refresh_token(self) -> str:
        """Generate a refresh token carrying only expiry claims."""
        payload = self._base_claims(self._refresh_lifetime)
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def create_tokens(self, session_id: str) -> TokenPair:
        """Mint a fresh access/refresh pair for ``session_id``."""
        return TokenPair(
            access_token=self.issue_access_token(session_id),
            refresh_token=self.issue_refresh_token(),
        )

    def verify(
        self, token: str, *, ignore_expiration: bool = False
    ) -> Result[dict[str, Any], str]:
        """Verify a token and extract its payload.

        Args:
            token: Encoded token.
            ignore_expiration: Accept an expired token (signature still
                checked). Used for the access token during refresh.

        Returns:
            Success(payload), or Failure with an AuthenticationError constant.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={
                    "require": ["exp"],
                    "verify_exp": not ignore_expiration,
                },
            )
            return Success(value=payload)

        except ExpiredSignatureError:
            return Failure(error=AuthenticationError.EXPIRED_TOKEN)
        except InvalidSignatureError:
            return Failure(error=AuthenticationError.INVALID_TOKEN)
        except DecodeError:
            return Failure(error=AuthenticationError.MALFORMED_TOKEN)
        except InvalidTokenError:
            return Failure(error=AuthenticationError.INVALID_TOKEN)

    @staticmethod
    def _base_claims(lifetime: timedelta) -> dict[str, Any]:
        now = datetime.now(UTC)
        return {
            "iat": int(now.timestamp()),
            "exp": int((now + lifetime).timestamp()),
            "jti": str(uuid7()),
        }
