"""Account commands (write operations).

Commands are immutable data containers; the server validates them.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, kw_only=True)
class CreateUser:
    """Create a new user.

    At least one of ``username`` or ``email`` must be valid. The email is
    lower-cased before it is stored; the password, when given, is hashed.

    Example:
        >>> command = CreateUser(username="ann", email="ann@x.com", password="Secret1!")
        >>> result = await server.create_user(command)
    """

    username: str | None = None
    email: str | None = None
    password: str | None = None
    profile: dict[str, Any] = field(default_factory=dict)
