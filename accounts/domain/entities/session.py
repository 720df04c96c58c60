"""Session domain entity.

Pure business logic, no framework dependencies.

A session binds a user to a validity flag and advisory client metadata.
Sessions are never deleted, only invalidated, and invalidation is
permanent: ``valid`` moves from True to False and never back.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(slots=True, kw_only=True)
class Session:
    """Authenticated device/client binding for a user.

    Attributes:
        id: Opaque, unguessable session identifier (allocated by storage).
        user_id: Owning user.
        valid: Validity flag. Starts True; flipped to False by logout,
            explicit invalidation or a password reset.
        ip_address: Last-seen client IP (advisory only).
        user_agent: Last-seen user agent (advisory only).
        created_at: When the session was created.
        updated_at: Last refresh or invalidation time.

    Example:
        >>> session = Session(id="s1", user_id="u1")
        >>> session.valid
        True
    """

    id: str
    user_id: str
    valid: bool = True
    ip_address: str | None = None
    user_agent: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None
