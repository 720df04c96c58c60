"""Base domain event class.

Domain events record "things that happened" and are named in past tense
(UserLoginSucceeded, SessionInvalidated). They are published after the
storage write they describe has completed.

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    ... class UserCreated(DomainEvent):
    ...     user_id: str
    >>> event = UserCreated(user_id="u1")
    >>> event.event_id  # Auto-generated UUID
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    Attributes:
        event_id: Unique identifier for this event instance (uuid4).
        occurred_at: When the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
