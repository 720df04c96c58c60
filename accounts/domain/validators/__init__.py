"""Validation functions."""

from accounts.domain.validators.functions import (
    validate_email,
    validate_password,
    validate_token,
    validate_username,
)

__all__ = [
    "validate_email",
    "validate_password",
    "validate_token",
    "validate_username",
]
