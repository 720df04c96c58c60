"""AccountsServer - the public entry point of the accounts core.

Composes the credential authenticator, session manager and single-use
token manager over the storage, mail and hashing ports. Every business
failure comes back as ``Failure(AccountsError)``; only collaborator
exceptions (storage, mail) propagate.

Usage:
    >>> server = build_accounts_server(settings)
    >>> created = await server.create_user(CreateUser(username="ann", password="Secret1!"))
    >>> result = await server.login({"username": "ann"}, "Secret1!")
    >>> match result:
    ...     case Success(value=login):
    ...         access_token = login.tokens.access_token
    ...     case Failure(error=error):
    ...         print(error.code, error.status_code)
"""

from collections.abc import Mapping
from typing import Any

from uuid_extensions import uuid7

from accounts.application.commands import CreateUser
from accounts.application.dtos import LoginResult
from accounts.application.email_templates import EmailTemplates
from accounts.application.errors import fail
from accounts.application.services import (
    CredentialAuthenticator,
    SessionManager,
    SingleUseTokenManager,
)
from accounts.core.constants import (
    ENROLL_ACCOUNT_PATH,
    RESET_PASSWORD_PATH,
    VERIFY_EMAIL_PATH,
)
from accounts.core.enums import ErrorCode
from accounts.core.result import Failure, Result, Success
from accounts.domain.entities.session import Session
from accounts.domain.entities.user import EmailRecord, User
from accounts.domain.enums import TokenPurpose
from accounts.domain.errors import AccountsError
from accounts.domain.events import (
    AccountEmailSent,
    UserCreated,
    UserLoginFailed,
    UserLoginSucceeded,
    UserPasswordChanged,
)
from accounts.domain.protocols import (
    EmailProtocol,
    EventBusProtocol,
    PasswordHashingProtocol,
    SessionValidator,
    UserRepository,
)
from accounts.domain.validators import (
    validate_email,
    validate_password,
    validate_username,
)
from accounts.domain.value_objects import EmailMessage, TokenPair

_LINK_PATHS: dict[TokenPurpose, str] = {
    TokenPurpose.VERIFY_EMAIL: VERIFY_EMAIL_PATH,
    TokenPurpose.RESET_PASSWORD: RESET_PASSWORD_PATH,
    TokenPurpose.ENROLL: ENROLL_ACCOUNT_PATH,
}


class AccountsServer:
    """Account lifecycle operations: users, sessions, tokens and emails."""

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        email_service: EmailProtocol,
        event_bus: EventBusProtocol,
        credential_authenticator: CredentialAuthenticator,
        session_manager: SessionManager,
        token_manager: SingleUseTokenManager,
        session_validator: SessionValidator,
        site_url: str,
        email_from: str,
        templates: EmailTemplates | None = None,
    ) -> None:
        """Initialize the server.

        Args:
            user_repo: User storage.
            password_service: Password hashing.
            email_service: Outbound mail.
            event_bus: Event bus for publishing domain events.
            credential_authenticator: Login credential checks.
            session_manager: Session and token-pair lifecycle.
            token_manager: Single-use token issue/redeem.
            session_validator: Extra veto run by resume_session.
            site_url: Base URL for emailed links (no trailing slash).
            email_from: Default sender address.
            templates: Email templates (defaults to EmailTemplates()).
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._email_service = email_service
        self._event_bus = event_bus
        self._credentials = credential_authenticator
        self._sessions = session_manager
        self._tokens = token_manager
        self._session_validator = session_validator
        self._site_url = site_url.rstrip("/")
        self._email_from = email_from
        self._templates = templates or EmailTemplates()

    # ------------------------------------------------------------------
    # Login, sessions and tokens
    # ------------------------------------------------------------------

    async def login(
        self,
        identifier: object,
        password: object,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> Result[LoginResult, AccountsError]:
        """Authenticate credentials and open a new session.

        Args:
            identifier: Plain string or mapping with id/username/email.
            password: Plaintext password.
            ip_address: Client IP recorded on the session.
            user_agent: Client user agent recorded on the session.

        Returns:
            Success(LoginResult) with the session id, user and token pair.
            Failure(AccountsError) otherwise.

        Side Effects:
            - Creates a session (on success).
            - Publishes UserLoginSucceeded or UserLoginFailed.
        """
        authenticated = await self._credentials.authenticate(identifier, password)
        if isinstance(authenticated, Failure):
            await self._event_bus.publish(
                UserLoginFailed(
                    identifier=_identifier_echo(authenticated.error),
                    reason=authenticated.error.code.value,
                )
            )
            return authenticated
        user = authenticated.value

        session_id = await self._sessions.create_session(
            user.id, ip_address, user_agent
        )
        tokens = self._sessions.create_tokens(session_id)

        await self._event_bus.publish(
            UserLoginSucceeded(
                user_id=user.id,
                session_id=session_id,
                ip_address=ip_address,
                user_agent=user_agent,
            )
        )
        return Success(value=LoginResult(session_id=session_id, user=user, tokens=tokens))

    async def refresh_tokens(
        self,
        access_token: object,
        refresh_token: object,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> Result[LoginResult, AccountsError]:
        """Mint a fresh token pair for a still-valid session."""
        return await self._sessions.refresh(
            access_token, refresh_token, ip_address, user_agent
        )

    def create_tokens(self, session_id: str) -> TokenPair:
        """Mint an access/refresh pair for an existing session id."""
        return self._sessions.create_tokens(session_id)

    async def find_session_by_access_token(
        self, access_token: object
    ) -> Result[Session, AccountsError]:
        """Resolve the session (valid or not) named by an unexpired access token."""
        return await self._sessions.resolve_from_access_token(access_token)

    async def logout(self, access_token: object) -> Result[None, AccountsError]:
        """Invalidate the session named by ``access_token``.

        Unlike resume_session, an already invalidated session is an error
        here (SESSION_INVALIDATED).
        """
        resolved = await self._sessions.resolve_from_access_token(access_token)
        if isinstance(resolved, Failure):
            return resolved
        session = resolved.value

        if not session.valid:
            return fail(
                ErrorCode.SESSION_INVALIDATED,
                "Session is no longer valid",
                {"session_id": session.id},
            )

        user = await self._user_repo.find_by_id(session.user_id)
        if user is None:
            return fail(ErrorCode.USER_NOT_FOUND, "User not found", {"id": session.user_id})

        return await self._sessions.invalidate(session.id, reason="logout")

    async def resume_session(
        self, access_token: object
    ) -> Result[User | None, AccountsError]:
        """Return the user behind ``access_token``.

        Returns:
            Success(user) for a valid session accepted by the validator.
            Success(None) when the session has been invalidated.
            Failure with TOKENS_INVALID, SESSION_NOT_FOUND, USER_NOT_FOUND
            or RESUME_REJECTED.
        """
        resolved = await self._sessions.resolve_from_access_token(access_token)
        if isinstance(resolved, Failure):
            return resolved
        session = resolved.value

        if not session.valid:
            return Success(value=None)

        user = await self._user_repo.find_by_id(session.user_id)
        if user is None:
            return fail(ErrorCode.USER_NOT_FOUND, "User not found", {"id": session.user_id})

        try:
            validated = await self._session_validator.validate(user, session)
        except Exception as e:
            return fail(
                ErrorCode.RESUME_REJECTED,
                str(e) or "Session rejected",
                {"id": user.id},
            )
        if isinstance(validated, Failure):
            return fail(
                ErrorCode.RESUME_REJECTED,
                str(validated.error) or "Session rejected",
                {"id": user.id},
            )

        return Success(value=user)

    async def verify_email(self, token: object) -> Result[None, AccountsError]:
        """Redeem an email verification token."""
        return await self._tokens.redeem_verification(token)

    async def reset_password(
        self, token: object, new_password: object
    ) -> Result[None, AccountsError]:
        """Redeem a reset-password or enrollment token; logs out every session."""
        return await self._tokens.redeem_password_reset(token, new_password)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def create_user(self, candidate: CreateUser) -> Result[str, AccountsError]:
        """Create a user and return its id.

        Returns:
            Success(user_id), or Failure with MALFORMED_REQUEST,
            DUPLICATE_USERNAME or DUPLICATE_EMAIL. Duplicates are detected
            before any write.
        """
        details = {
            key: value
            for key, value in (("username", candidate.username), ("email", candidate.email))
            if isinstance(value, str)
        } or None

        if candidate.username is None and candidate.email is None:
            return fail(
                ErrorCode.MALFORMED_REQUEST, "Username or email is required", details
            )
        try:
            username = (
                validate_username(candidate.username)
                if candidate.username is not None
                else None
            )
            email = (
                validate_email(candidate.email) if candidate.email is not None else None
            )
            password = (
                validate_password(candidate.password)
                if candidate.password is not None
                else None
            )
        except ValueError as e:
            return fail(ErrorCode.MALFORMED_REQUEST, str(e), details)
        if not isinstance(candidate.profile, Mapping):
            return fail(ErrorCode.MALFORMED_REQUEST, "Profile must be a mapping", details)

        if username is not None and await self._user_repo.find_by_username(username):
            return fail(
                ErrorCode.DUPLICATE_USERNAME, "Username already exists", details
            )
        if email is not None and await self._user_repo.find_by_email(email):
            return fail(ErrorCode.DUPLICATE_EMAIL, "Email already exists", details)

        user = User(
            id=str(uuid7()),
            username=username,
            emails=[EmailRecord(address=email)] if email is not None else [],
            profile=dict(candidate.profile),
        )
        password_hash = (
            self._password_service.hash_password(password)
            if password is not None
            else None
        )
        await self._user_repo.save(user, password_hash)

        await self._event_bus.publish(
            UserCreated(user_id=user.id, username=username, email=email)
        )
        return Success(value=user.id)

    async def find_user_by_id(self, user_id: str) -> User | None:
        return await self._user_repo.find_by_id(user_id)

    async def find_user_by_username(self, username: str) -> User | None:
        return await self._user_repo.find_by_username(username)

    async def find_user_by_email(self, email: object) -> User | None:
        """Find the owner of ``email``. Malformed input owns nothing."""
        try:
            email = validate_email(email)
        except ValueError:
            return None
        return await self._user_repo.find_by_email(email)

    async def add_email(
        self, user_id: str, address: object, verified: bool = False
    ) -> Result[None, AccountsError]:
        """Add an address to the user's email set.

        Adding an address the user already owns is a no-op.
        """
        try:
            address = validate_email(address)
        except ValueError as e:
            return fail(ErrorCode.MALFORMED_REQUEST, str(e), {"id": user_id})

        found = await self._require_user(user_id)
        if isinstance(found, Failure):
            return found

        owner = await self._user_repo.find_by_email(address)
        if owner is not None and owner.id != user_id:
            return fail(
                ErrorCode.DUPLICATE_EMAIL,
                "Email already exists",
                {"id": user_id, "email": address},
            )

        await self._user_repo.add_email(user_id, address, verified)
        return Success(value=None)

    async def remove_email(
        self, user_id: str, address: object
    ) -> Result[None, AccountsError]:
        try:
            address = validate_email(address)
        except ValueError as e:
            return fail(ErrorCode.MALFORMED_REQUEST, str(e), {"id": user_id})

        found = await self._require_user(user_id)
        if isinstance(found, Failure):
            return found
        await self._user_repo.remove_email(user_id, address)
        return Success(value=None)

    async def set_password(
        self, user_id: str, new_password: object
    ) -> Result[None, AccountsError]:
        """Hash and store a new password. Existing sessions stay valid."""
        try:
            new_password = validate_password(new_password)
        except ValueError as e:
            return fail(ErrorCode.MALFORMED_REQUEST, str(e), {"id": user_id})

        found = await self._require_user(user_id)
        if isinstance(found, Failure):
            return found

        await self._user_repo.set_password(
            user_id, self._password_service.hash_password(new_password)
        )
        await self._event_bus.publish(
            UserPasswordChanged(user_id=user_id, via_token=False)
        )
        return Success(value=None)

    async def set_profile(
        self, user_id: str, profile: Mapping[str, Any]
    ) -> Result[None, AccountsError]:
        """Replace the user's profile."""
        found = await self._require_user(user_id)
        if isinstance(found, Failure):
            return found
        await self._user_repo.set_profile(user_id, dict(profile))
        return Success(value=None)

    async def update_profile(
        self, user_id: str, profile: Mapping[str, Any]
    ) -> Result[dict[str, Any], AccountsError]:
        """Shallow-merge ``profile`` into the stored profile and return the result."""
        found = await self._require_user(user_id)
        if isinstance(found, Failure):
            return found
        merged = {**found.value.profile, **profile}
        await self._user_repo.set_profile(user_id, merged)
        return Success(value=merged)

    # ------------------------------------------------------------------
    # Account emails
    # ------------------------------------------------------------------

    async def send_verification_email(
        self, user_id: str, address: object = None
    ) -> Result[None, AccountsError]:
        """Email a verification link (default: first unverified address)."""
        found = await self._require_user(user_id)
        if isinstance(found, Failure):
            return found
        user = found.value
        return await self._send_token_email(
            user,
            address if address is not None else user.first_unverified_email(),
            TokenPurpose.VERIFY_EMAIL,
        )

    async def send_reset_password_email(
        self, user_id: str, address: object = None
    ) -> Result[None, AccountsError]:
        """Email a reset-password link (default: first address)."""
        found = await self._require_user(user_id)
        if isinstance(found, Failure):
            return found
        user = found.value
        return await self._send_token_email(
            user,
            address if address is not None else user.first_email(),
            TokenPurpose.RESET_PASSWORD,
        )

    async def send_enrollment_email(
        self, user_id: str, address: object = None
    ) -> Result[None, AccountsError]:
        """Email an enrollment (set-your-password) link (default: first address)."""
        found = await self._require_user(user_id)
        if isinstance(found, Failure):
            return found
        user = found.value
        return await self._send_token_email(
            user,
            address if address is not None else user.first_email(),
            TokenPurpose.ENROLL,
        )

    async def _send_token_email(
        self, user: User, address: object, purpose: TokenPurpose
    ) -> Result[None, AccountsError]:
        if address is not None:
            try:
                address = validate_email(address)
            except ValueError as e:
                return fail(ErrorCode.MALFORMED_REQUEST, str(e), {"id": user.id})
        if address is None or not user.has_email(address):
            return fail(
                ErrorCode.UNKNOWN_ADDRESS,
                "No such email address for user",
                {"id": user.id},
            )

        # Token stays issued if sending raises.
        token = await self._tokens.issue(user, address, purpose)
        url = f"{self._site_url}/{_LINK_PATHS[purpose]}/{token}"
        template = self._templates.for_purpose(purpose)

        await self._email_service.send(
            EmailMessage(
                from_address=template.from_address or self._email_from,
                to=address,
                subject=template.subject(user),
                text=template.text(user, url),
            )
        )
        await self._event_bus.publish(
            AccountEmailSent(user_id=user.id, address=address, purpose=purpose.value)
        )
        return Success(value=None)

    async def _require_user(self, user_id: str) -> Result[User, AccountsError]:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            return fail(ErrorCode.USER_NOT_FOUND, "User not found", {"id": user_id})
        return Success(value=user)


def _identifier_echo(error: AccountsError) -> str | None:
    if not error.details:
        return None
    return next(iter(error.details.values()))
