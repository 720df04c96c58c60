"""Accounts domain error.

Single structured error surfaced by every accounts operation. Carries the
kind (ErrorCode), a message, an optional context payload and an HTTP-style
status hint.

Status convention:
    - 400 for MALFORMED_REQUEST
    - 403 for everything else, including not-found kinds, so callers
      cannot use status codes to enumerate users, sessions or tokens.

Usage:
    return Failure(
        error=AccountsError(
            code=ErrorCode.USER_NOT_FOUND,
            message="User not found",
            details={"username": "ann"},
        )
    )
"""

from dataclasses import dataclass

from accounts.core.enums import ErrorCode
from accounts.core.errors import DomainError

BAD_REQUEST = 400
FORBIDDEN = 403


@dataclass(frozen=True, slots=True, kw_only=True)
class AccountsError(DomainError):
    """Accounts error value (returned in Failure, never raised).

    Attributes:
        code: Error kind.
        message: Human-readable message.
        details: Identifier echo (id, username, email). Never a password,
            hash, token secret or full single-use token.
    """

    @property
    def status_code(self) -> int:
        """HTTP-style status hint for the transport layer."""
        if self.code is ErrorCode.MALFORMED_REQUEST:
            return BAD_REQUEST
        return FORBIDDEN
