"""Core error types."""

from accounts.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
