"""Application DTOs."""

from accounts.application.dtos.auth_dtos import LoginResult

__all__ = ["LoginResult"]
