"""Capability protocols for pluggable login and resume checks.

``Authenticator`` replaces the built-in password check when the embedding
application supplies one (LDAP, SSO bridge, legacy hash store, ...).
``SessionValidator`` adds an extra veto when a session is resumed.

Both may return a Failure or raise; either outcome is wrapped by the
caller into AUTHENTICATION_FAILED / RESUME_REJECTED respectively.
"""

from typing import Protocol

from accounts.core.result import Result
from accounts.domain.entities.session import Session
from accounts.domain.entities.user import User
from accounts.domain.value_objects.login_identifier import LoginIdentifier


class Authenticator(Protocol):
    """Resolve a login identifier and password to a user."""

    async def authenticate(
        self, identifier: LoginIdentifier, password: str
    ) -> Result[User, object]:
        """Return Success(user) when the credentials are accepted."""
        ...


class SessionValidator(Protocol):
    """Extra check run by resume-session against a valid session."""

    async def validate(self, user: User, session: Session) -> Result[None, str]:
        """Return Success(None) to accept, Failure(reason) to reject."""
        ...
