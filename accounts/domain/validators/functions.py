"""Centralized validation functions.

Validators are pure functions that raise ValueError on failure and return
the (possibly normalized) value on success. Callers translate ValueError
into a MALFORMED_REQUEST error.
"""

import re

from accounts.core.constants import MAX_PASSWORD_BYTES

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def validate_email(v: object) -> str:
    """Validate email format.

    Args:
        v: Candidate email address.

    Returns:
        Normalized email (lowercase).

    Raises:
        ValueError: If the value is not a string or not an email address.

    Example:
        >>> validate_email("Ann@X.COM")
        'ann@x.com'
    """
    if not isinstance(v, str) or not EMAIL_PATTERN.match(v):
        raise ValueError(f"Invalid email format: {v!r}")
    return v.lower()


def validate_username(v: object) -> str:
    """Validate a username.

    Any non-blank string is accepted; surrounding whitespace is not.

    Raises:
        ValueError: If the value is not a non-blank string.
    """
    if not isinstance(v, str) or not v.strip():
        raise ValueError("Username must be a non-empty string")
    if v != v.strip():
        raise ValueError("Username must not start or end with whitespace")
    return v


def validate_password(v: object) -> str:
    """Validate a plaintext password literal.

    Only shape is checked here (non-empty ``str`` within the bcrypt input
    limit). Objects, numbers and empty strings are rejected before any
    storage or hashing call.

    Raises:
        ValueError: If the value is not a non-empty string, or is longer
            than MAX_PASSWORD_BYTES once UTF-8 encoded.
    """
    if not isinstance(v, str) or v == "":
        raise ValueError("Password must be a non-empty string")
    if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(
            f"Password must be at most {MAX_PASSWORD_BYTES} bytes (UTF-8)"
        )
    return v


def validate_token(v: object) -> str:
    """Validate a bearer or single-use token literal (non-empty string).

    Raises:
        ValueError: If the value is not a non-empty string.
    """
    if not isinstance(v, str) or not v:
        raise ValueError("Token must be a non-empty string")
    return v
