"""SessionRepository protocol for session persistence.

Port (interface) for hexagonal architecture.

Consistency requirement: a ``find_by_id`` issued after a completed
``invalidate``/``invalidate_all_for_user`` must observe ``valid=False``
(read-committed per session at minimum).
"""

from typing import Protocol

from accounts.domain.entities.session import Session


class SessionRepository(Protocol):
    """Session repository protocol (port).

    Sessions are never deleted; they are only invalidated.
    """

    async def create(
        self, user_id: str, ip_address: str | None, user_agent: str | None
    ) -> str:
        """Allocate and persist a new valid session.

        Returns:
            The new session id (opaque, unguessable).
        """
        ...

    async def find_by_id(self, session_id: str) -> Session | None:
        """Find session by id."""
        ...

    async def update(
        self, session_id: str, ip_address: str | None, user_agent: str | None
    ) -> None:
        """Record last-seen ip and user agent for a session."""
        ...

    async def invalidate(self, session_id: str) -> None:
        """Set ``valid=False`` on one session. Idempotent."""
        ...

    async def invalidate_all_for_user(self, user_id: str) -> None:
        """Set ``valid=False`` on every session owned by ``user_id``."""
        ...
