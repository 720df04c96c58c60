"""AccountsServer factory.

Wires the application services over the configured adapters. Storage
defaults to the in-memory repositories; pass real repositories (and a
real email service) to run against durable storage and a mail relay.
"""

from typing import TYPE_CHECKING

from accounts.core.config import Settings, get_settings
from accounts.core.container.events import get_event_bus
from accounts.core.container.infrastructure import (
    get_email_service,
    get_password_service,
    get_single_use_token_service,
    get_token_service,
)

if TYPE_CHECKING:
    from accounts.application import AccountsServer, EmailTemplates
    from accounts.domain.protocols import (
        Authenticator,
        EmailProtocol,
        EventBusProtocol,
        SessionRepository,
        SessionValidator,
        UserRepository,
    )


def build_accounts_server(
    settings: Settings | None = None,
    *,
    user_repo: "UserRepository | None" = None,
    session_repo: "SessionRepository | None" = None,
    email_service: "EmailProtocol | None" = None,
    event_bus: "EventBusProtocol | None" = None,
    authenticator: "Authenticator | None" = None,
    session_validator: "SessionValidator | None" = None,
    templates: "EmailTemplates | None" = None,
) -> "AccountsServer":
    """Build a fully wired AccountsServer.

    Args:
        settings: Configuration (defaults to ``get_settings()``).
        user_repo: User storage (default: MemoryUserRepository).
        session_repo: Session storage (default: MemorySessionRepository).
        email_service: Mail sender (default: StubEmailService).
        event_bus: Event bus (default: app-scoped InMemoryEventBus).
        authenticator: Replaces the password check at login.
        session_validator: Extra veto for resume_session.
        templates: Email wording overrides.

    Returns:
        AccountsServer ready to use.

    Example:
        >>> server = build_accounts_server(Settings(token_secret="x" * 32))
    """
    from accounts.application import AccountsServer
    from accounts.application.services import (
        AcceptAllSessionValidator,
        CredentialAuthenticator,
        PasswordAuthenticator,
        SessionManager,
        SingleUseTokenManager,
    )
    from accounts.infrastructure.persistence import (
        MemorySessionRepository,
        MemoryUserRepository,
    )

    settings = settings or get_settings()
    user_repo = user_repo or MemoryUserRepository()
    session_repo = session_repo or MemorySessionRepository()
    email_service = email_service or get_email_service(settings)
    event_bus = event_bus or get_event_bus(settings)
    password_service = get_password_service(settings)

    session_manager = SessionManager(
        session_repo=session_repo,
        user_repo=user_repo,
        token_service=get_token_service(settings),
        event_bus=event_bus,
    )
    token_manager = SingleUseTokenManager(
        user_repo=user_repo,
        token_service=get_single_use_token_service(settings),
        password_service=password_service,
        session_manager=session_manager,
        event_bus=event_bus,
    )
    credential_authenticator = CredentialAuthenticator(
        default=PasswordAuthenticator(user_repo, password_service),
        override=authenticator,
    )

    return AccountsServer(
        user_repo=user_repo,
        password_service=password_service,
        email_service=email_service,
        event_bus=event_bus,
        credential_authenticator=credential_authenticator,
        session_manager=session_manager,
        token_manager=token_manager,
        session_validator=session_validator or AcceptAllSessionValidator(),
        site_url=settings.site_url,
        email_from=settings.email_from,
        templates=templates,
    )
