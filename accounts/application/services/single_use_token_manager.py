"""Single-use tokens for email verification, password reset and enrollment.

Tokens are stored embedded under the owning user and deleted by the same
storage call that applies their effect, so a token can be redeemed once.

Redeem flow:
1. Find the owner by token, then the exact record (first match wins)
2. Reject missing or expired records (TOKEN_EXPIRED_OR_INVALID)
3. Require the token's address to still belong to the user (UNKNOWN_ADDRESS)
4. Apply the effect and delete the token in one conditional storage call;
   a token already consumed by a concurrent redemption is rejected
5. Emit the matching domain event
"""

from accounts.application.errors import fail
from accounts.application.services.session_manager import SessionManager
from accounts.core.constants import TOKEN_LOG_PREFIX_LENGTH
from accounts.core.enums import ErrorCode
from accounts.core.result import Failure, Result, Success
from accounts.domain.entities.user import SingleUseToken, User
from accounts.domain.enums import TokenPurpose
from accounts.domain.errors import AccountsError
from accounts.domain.events import (
    SingleUseTokenIssued,
    SingleUseTokenRejected,
    UserEmailVerified,
    UserPasswordChanged,
)
from accounts.domain.protocols import (
    EventBusProtocol,
    PasswordHashingProtocol,
    SingleUseTokenProtocol,
    UserRepository,
)
from accounts.domain.validators import validate_password, validate_token


class SingleUseTokenManager:
    """Issue and redeem single-use account tokens."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_service: SingleUseTokenProtocol,
        password_service: PasswordHashingProtocol,
        session_manager: SessionManager,
        event_bus: EventBusProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._token_service = token_service
        self._password_service = password_service
        self._session_manager = session_manager
        self._event_bus = event_bus

    async def issue(self, user: User, address: str, purpose: TokenPurpose) -> str:
        """Generate a token and record it against (user, address, purpose).

        The user's expired token records are dropped first, so repeated
        sends do not grow the stored lists without bound.

        Returns:
            The token string to embed in the emailed link.
        """
        expired = [
            record.token
            for record in (*user.verification_tokens, *user.reset_tokens)
            if record.is_expired(self._token_service.lifetime_seconds(record.purpose))
        ]
        if expired:
            await self._user_repo.remove_tokens(user.id, expired)

        token = self._token_service.generate_token()
        if purpose.sets_password:
            await self._user_repo.add_reset_password_token(
                user.id, address, token, purpose
            )
        else:
            await self._user_repo.add_email_verification_token(user.id, address, token)

        await self._event_bus.publish(
            SingleUseTokenIssued(
                user_id=user.id,
                address=address,
                purpose=purpose.value,
                token_prefix=token[:TOKEN_LOG_PREFIX_LENGTH],
            )
        )
        return token

    async def redeem_verification(self, token: object) -> Result[None, AccountsError]:
        """Mark the token's address verified and delete the token.

        Returns:
            Success(None), or Failure with MALFORMED_REQUEST,
            TOKEN_EXPIRED_OR_INVALID or UNKNOWN_ADDRESS.
        """
        try:
            token = validate_token(token)
        except ValueError as e:
            return fail(ErrorCode.MALFORMED_REQUEST, str(e))

        user = await self._user_repo.find_by_email_verification_token(token)
        record = user.find_verification_token(token) if user else None
        checked = await self._check_record(
            user, record, token, TokenPurpose.VERIFY_EMAIL, "Verify email link expired"
        )
        if isinstance(checked, Failure):
            return checked
        user, record = checked.value

        if not await self._user_repo.verify_email(user.id, record.address, token):
            return await self._consumed_elsewhere(
                token, TokenPurpose.VERIFY_EMAIL, "Verify email link expired"
            )
        await self._event_bus.publish(
            UserEmailVerified(user_id=user.id, address=record.address)
        )
        return Success(value=None)

    async def redeem_password_reset(
        self, token: object, new_password: object
    ) -> Result[None, AccountsError]:
        """Set a new password from a reset or enrollment token.

        Every session of the user is invalidated once the password is stored.

        Returns:
            Success(None), or Failure with MALFORMED_REQUEST,
            TOKEN_EXPIRED_OR_INVALID or UNKNOWN_ADDRESS.
        """
        try:
            token = validate_token(token)
            new_password = validate_password(new_password)
        except ValueError as e:
            return fail(ErrorCode.MALFORMED_REQUEST, str(e))

        user = await self._user_repo.find_by_reset_password_token(token)
        record = user.find_reset_token(token) if user else None
        checked = await self._check_record(
            user,
            record,
            token,
            record.purpose if record else TokenPurpose.RESET_PASSWORD,
            "Reset password link expired",
        )
        if isinstance(checked, Failure):
            return checked
        user, record = checked.value

        password_hash = self._password_service.hash_password(new_password)
        if not await self._user_repo.set_reset_password(
            user.id, record.address, password_hash, token
        ):
            return await self._consumed_elsewhere(
                token, record.purpose, "Reset password link expired"
            )
        await self._session_manager.invalidate_all(user.id, reason="password_reset")

        await self._event_bus.publish(
            UserPasswordChanged(user_id=user.id, via_token=True)
        )
        return Success(value=None)

    async def _check_record(
        self,
        user: User | None,
        record: SingleUseToken | None,
        token: str,
        purpose: TokenPurpose,
        expired_message: str,
    ) -> Result[tuple[User, SingleUseToken], AccountsError]:
        if user is None or record is None:
            return await self._rejected(
                token, purpose, fail(ErrorCode.TOKEN_EXPIRED_OR_INVALID, expired_message)
            )

        if record.is_expired(self._token_service.lifetime_seconds(record.purpose)):
            return await self._rejected(
                token, purpose, fail(ErrorCode.TOKEN_EXPIRED_OR_INVALID, expired_message)
            )

        if not user.has_email(record.address):
            return await self._rejected(
                token,
                purpose,
                fail(
                    ErrorCode.UNKNOWN_ADDRESS,
                    "Token has invalid email address",
                    {"id": user.id},
                ),
            )

        return Success(value=(user, record))

    async def _consumed_elsewhere(
        self, token: str, purpose: TokenPurpose, message: str
    ) -> Failure[AccountsError]:
        # Another redemption removed the record after the lookup.
        return await self._rejected(
            token, purpose, fail(ErrorCode.TOKEN_EXPIRED_OR_INVALID, message)
        )

    async def _rejected(
        self,
        token: str,
        purpose: TokenPurpose,
        failure: Failure[AccountsError],
    ) -> Failure[AccountsError]:
        await self._event_bus.publish(
            SingleUseTokenRejected(
                purpose=purpose.value,
                reason=failure.error.code.value,
                token_prefix=token[:TOKEN_LOG_PREFIX_LENGTH],
            )
        )
        return failure
