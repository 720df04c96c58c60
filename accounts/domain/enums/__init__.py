"""Domain enums."""

from accounts.domain.enums.token_purpose import TokenPurpose

__all__ = ["TokenPurpose"]
