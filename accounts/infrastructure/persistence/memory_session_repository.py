"""In-memory session storage implementation.

Dict-backed SessionRepository. Sessions are never removed; invalidation
only flips ``valid`` to False.
"""

import copy
from datetime import UTC, datetime
from uuid import uuid4

from accounts.domain.entities.session import Session


class MemorySessionRepository:
    """In-memory dict storage for sessions.

    Usage:
        sessions = MemorySessionRepository()
        session_id = await sessions.create(user_id, "10.0.0.1", "curl/8.0")
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._sessions: dict[str, Session] = {}

    async def create(
        self, user_id: str, ip_address: str | None, user_agent: str | None
    ) -> str:
        """Allocate a new valid session and return its id (uuid4, 122 random bits)."""
        session_id = str(uuid4())
        self._sessions[session_id] = Session(
            id=session_id,
            user_id=user_id,
            valid=True,
            ip_address=ip_address,
            user_agent=user_agent,
        )
        return session_id

    async def find_by_id(self, session_id: str) -> Session | None:
        session = self._sessions.get(session_id)
        return copy.deepcopy(session) if session is not None else None

    async def update(
        self, session_id: str, ip_address: str | None, user_agent: str | None
    ) -> None:
        session = self._get(session_id)
        session.ip_address = ip_address
        session.user_agent = user_agent
        session.updated_at = datetime.now(UTC)

    async def invalidate(self, session_id: str) -> None:
        session = self._get(session_id)
        session.valid = False
        session.updated_at = datetime.now(UTC)

    async def invalidate_all_for_user(self, user_id: str) -> None:
        now = datetime.now(UTC)
        for session in self._sessions.values():
            if session.user_id == user_id and session.valid:
                session.valid = False
                session.updated_at = now

    async def list_for_user(self, user_id: str) -> list[Session]:
        """Return copies of every session owned by ``user_id`` (test helper)."""
        return [
            copy.deepcopy(session)
            for session in self._sessions.values()
            if session.user_id == user_id
        ]

    def _get(self, session_id: str) -> Session:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise KeyError(f"Session {session_id} not found") from None
