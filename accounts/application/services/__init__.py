"""Application services composed by the accounts server."""

from accounts.application.services.credential_authenticator import (
    CredentialAuthenticator,
    PasswordAuthenticator,
)
from accounts.application.services.session_manager import SessionManager
from accounts.application.services.session_validator import (
    AcceptAllSessionValidator,
)
from accounts.application.services.single_use_token_manager import (
    SingleUseTokenManager,
)

__all__ = [
    "AcceptAllSessionValidator",
    "CredentialAuthenticator",
    "PasswordAuthenticator",
    "SessionManager",
    "SingleUseTokenManager",
]
