"""In-memory persistence adapters."""

from accounts.infrastructure.persistence.memory_session_repository import (
    MemorySessionRepository,
)
from accounts.infrastructure.persistence.memory_user_repository import (
    MemoryUserRepository,
)

__all__ = ["MemorySessionRepository", "MemoryUserRepository"]
