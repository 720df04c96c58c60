"""Container module - centralized dependency injection.

Organized by concern:
- infrastructure: logger, password hashing, token codecs, email
- events: event bus with logging subscriptions
- server: AccountsServer wiring

    from accounts.core.container import build_accounts_server, get_logger
"""

from accounts.core.config import get_settings
from accounts.core.container.events import get_event_bus
from accounts.core.container.infrastructure import (
    get_email_service,
    get_logger,
    get_password_service,
    get_single_use_token_service,
    get_token_service,
)
from accounts.core.container.server import build_accounts_server

__all__ = [
    "build_accounts_server",
    "get_email_service",
    "get_event_bus",
    "get_logger",
    "get_password_service",
    "get_settings",
    "get_single_use_token_service",
    "get_token_service",
]
