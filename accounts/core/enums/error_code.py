"""Machine-readable error codes for accounts operations.

Codes follow ENTITY_REASON naming. Each AccountsError carries exactly one
of these; the HTTP-style status hint is derived from the code.

Categories:
- Request shape errors (MALFORMED_REQUEST)
- Credential errors (USER_NOT_FOUND, NO_PASSWORD_SET, INVALID_PASSWORD,
  AUTHENTICATION_FAILED)
- Conflict errors (DUPLICATE_*)
- Token and session errors (TOKENS_INVALID, SESSION_*)
- Single-use token errors (TOKEN_EXPIRED_OR_INVALID, UNKNOWN_ADDRESS)
- Hook rejections (RESUME_REJECTED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Accounts error codes (machine-readable)."""

    # Request shape errors
    MALFORMED_REQUEST = "malformed_request"

    # Credential errors
    USER_NOT_FOUND = "user_not_found"
    NO_PASSWORD_SET = "no_password_set"
    INVALID_PASSWORD = "invalid_password"
    AUTHENTICATION_FAILED = "authentication_failed"

    # Conflict errors
    DUPLICATE_USERNAME = "duplicate_username"
    DUPLICATE_EMAIL = "duplicate_email"

    # Token and session errors
    TOKENS_INVALID = "tokens_invalid"
    SESSION_NOT_FOUND = "session_not_found"
    SESSION_INVALIDATED = "session_invalidated"

    # Single-use token errors
    TOKEN_EXPIRED_OR_INVALID = "token_expired_or_invalid"
    UNKNOWN_ADDRESS = "unknown_address"

    # Hook rejections
    RESUME_REJECTED = "resume_rejected"
