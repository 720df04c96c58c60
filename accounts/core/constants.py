"""Centralized constants for internal implementation details.

These are NOT environment-specific configuration. For environment-specific
settings, use ``accounts/core/config.py`` instead.

Example:
    >>> from accounts.core.constants import TOKEN_BYTES
    >>> token = secrets.token_hex(TOKEN_BYTES)
"""

# =============================================================================
# Token and Key Lengths
# =============================================================================

TOKEN_BYTES: int = 32
"""Number of bytes for single-use token generation (32 bytes = 256 bits)."""

MIN_SECRET_BYTES: int = 32
"""Minimum length of the token signing secret (256 bits)."""

BCRYPT_ROUNDS_DEFAULT: int = 12
"""Default bcrypt work factor (cost parameter)."""

MAX_PASSWORD_BYTES: int = 72
"""bcrypt only reads the first 72 bytes of its input."""


# =============================================================================
# Logging
# =============================================================================

TOKEN_LOG_PREFIX_LENGTH: int = 8
"""Number of token characters kept when a token appears in logs or events."""


# =============================================================================
# Link Paths
# =============================================================================

VERIFY_EMAIL_PATH: str = "verify-email"
RESET_PASSWORD_PATH: str = "reset-password"
ENROLL_ACCOUNT_PATH: str = "enroll-account"
