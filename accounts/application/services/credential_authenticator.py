"""Credential authentication.

Flow:
1. Check input shape (identifier and password) before touching storage
2. Normalize the identifier into ById | ByUsername | ByEmail
3. Delegate to the configured Authenticator (override or password default)
4. Return Success(user) or Failure(AccountsError)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- Storage and hashing are injected via protocols
"""

from accounts.application.errors import fail
from accounts.core.enums import ErrorCode
from accounts.core.result import Failure, Result, Success
from accounts.domain.entities.user import User
from accounts.domain.errors import AccountsError
from accounts.domain.protocols import (
    Authenticator,
    PasswordHashingProtocol,
    UserRepository,
)
from accounts.domain.validators import validate_password
from accounts.domain.value_objects.login_identifier import (
    ByEmail,
    ById,
    ByUsername,
    LoginIdentifier,
    describe_raw_identifier,
    parse_login_identifier,
)


class PasswordAuthenticator:
    """Default authenticator: look the user up and verify the stored hash."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service

    async def authenticate(
        self, identifier: LoginIdentifier, password: str
    ) -> Result[User, AccountsError]:
        """Verify ``password`` against the hash stored for the identified user.

        Returns:
            Success(user) when the password matches.
            Failure with USER_NOT_FOUND, NO_PASSWORD_SET or INVALID_PASSWORD.
        """
        details = identifier.describe()

        user = await self._find_user(identifier)
        if user is None:
            return fail(ErrorCode.USER_NOT_FOUND, "User not found", details)

        password_hash = await self._user_repo.find_password_hash(user.id)
        if not password_hash:
            return fail(ErrorCode.NO_PASSWORD_SET, "User has no password set", details)

        if not self._password_service.verify_password(password, password_hash):
            return fail(ErrorCode.INVALID_PASSWORD, "Incorrect password", details)

        return Success(value=user)

    async def _find_user(self, identifier: LoginIdentifier) -> User | None:
        match identifier:
            case ById(user_id=user_id):
                return await self._user_repo.find_by_id(user_id)
            case ByUsername(username=username):
                return await self._user_repo.find_by_username(username)
            case ByEmail(email=email):
                return await self._user_repo.find_by_email(email)


class CredentialAuthenticator:
    """Validate login input and run the configured authenticator.

    When an override is supplied it replaces the password check entirely.
    Anything the override raises or returns as a Failure comes back as
    AUTHENTICATION_FAILED.

    Example:
        >>> authenticator = CredentialAuthenticator(default=PasswordAuthenticator(repo, hasher))
        >>> result = await authenticator.authenticate({"username": "ann"}, "Secret1!")
        >>> match result:
        ...     case Success(value=user): print(user.id)
        ...     case Failure(error=error): print(error.code)
    """

    def __init__(
        self,
        default: Authenticator,
        override: Authenticator | None = None,
    ) -> None:
        self._default = default
        self._override = override

    async def authenticate(
        self, raw_identifier: object, password: object
    ) -> Result[User, AccountsError]:
        """Authenticate a raw identifier and password.

        Args:
            raw_identifier: Plain string or mapping with id/username/email.
            password: Plaintext password literal.

        Returns:
            Success(user) or Failure(AccountsError).
        """
        details = describe_raw_identifier(raw_identifier)

        if not raw_identifier or not password:
            return fail(
                ErrorCode.MALFORMED_REQUEST,
                "Unrecognized options for login request",
                details,
            )

        try:
            valid_password = validate_password(password)
            identifier = parse_login_identifier(raw_identifier)
        except ValueError as e:
            return fail(ErrorCode.MALFORMED_REQUEST, str(e), details)

        if self._override is None:
            return await self._default.authenticate(identifier, valid_password)

        try:
            result = await self._override.authenticate(identifier, valid_password)
        except Exception as e:
            return fail(
                ErrorCode.AUTHENTICATION_FAILED,
                str(e) or "Authentication failed",
                identifier.describe(),
            )

        match result:
            case Success(value=User() as user):
                return Success(value=user)
            case Failure(error=error):
                return fail(
                    ErrorCode.AUTHENTICATION_FAILED,
                    str(error) or "Authentication failed",
                    identifier.describe(),
                )
            case _:
                return fail(
                    ErrorCode.AUTHENTICATION_FAILED,
                    "Authenticator did not return a user",
                    identifier.describe(),
                )
