"""Domain errors."""

from accounts.domain.errors.accounts_error import AccountsError
from accounts.domain.errors.authentication_error import AuthenticationError

__all__ = ["AccountsError", "AuthenticationError"]
