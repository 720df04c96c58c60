"""Helpers for building AccountsError failures in the application layer."""

from accounts.core.enums import ErrorCode
from accounts.core.result import Failure
from accounts.domain.errors import AccountsError


def fail(
    code: ErrorCode, message: str, details: dict[str, str] | None = None
) -> Failure[AccountsError]:
    """Wrap an AccountsError in a Failure.

    Example:
        >>> fail(ErrorCode.USER_NOT_FOUND, "User not found", {"id": "u1"}).error.status_code
        403
    """
    return Failure(error=AccountsError(code=code, message=message, details=details))
