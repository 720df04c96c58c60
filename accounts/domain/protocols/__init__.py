"""Domain protocols (ports).

Usage:
    from accounts.domain.protocols import UserRepository, SessionRepository
"""

from accounts.domain.protocols.authenticator_protocol import (
    Authenticator,
    SessionValidator,
)
from accounts.domain.protocols.email_protocol import EmailProtocol
from accounts.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from accounts.domain.protocols.logger_protocol import LoggerProtocol
from accounts.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from accounts.domain.protocols.session_repository import SessionRepository
from accounts.domain.protocols.single_use_token_protocol import (
    SingleUseTokenProtocol,
)
from accounts.domain.protocols.token_generation_protocol import (
    TokenGenerationProtocol,
)
from accounts.domain.protocols.user_repository import UserRepository

__all__ = [
    "Authenticator",
    "EmailProtocol",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "SessionRepository",
    "SessionValidator",
    "SingleUseTokenProtocol",
    "TokenGenerationProtocol",
    "UserRepository",
]
