"""In-memory user storage implementation.

Dict-backed UserRepository with no external dependencies. Suitable for
tests, development and single-process embedding. Data is lost on restart.

Every read returns a deep copy, so callers never alias stored records and
every mutation goes through one of the repository methods.
"""

import copy
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

from accounts.domain.entities.user import EmailRecord, SingleUseToken, User
from accounts.domain.enums import TokenPurpose


class MemoryUserRepository:
    """In-memory dict storage for users.

    Raises:
        KeyError: From mutating methods when the user id is unknown.
        ValueError: From ``save``/``add_email`` when a username or address is
            already owned by another user.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._users: dict[str, User] = {}
        self._password_hashes: dict[str, str] = {}

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    async def find_by_id(self, user_id: str) -> User | None:
        return self._copy(self._users.get(user_id))

    async def find_by_username(self, username: str) -> User | None:
        for user in self._users.values():
            if user.username is not None and user.username == username:
                return self._copy(user)
        return None

    async def find_by_email(self, email: str) -> User | None:
        return self._copy(self._owner_of(email))

    async def find_by_email_verification_token(self, token: str) -> User | None:
        for user in self._users.values():
            if any(record.token == token for record in user.verification_tokens):
                return self._copy(user)
        return None

    async def find_by_reset_password_token(self, token: str) -> User | None:
        for user in self._users.values():
            if any(record.token == token for record in user.reset_tokens):
                return self._copy(user)
        return None

    async def find_password_hash(self, user_id: str) -> str | None:
        return self._password_hashes.get(user_id)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def save(self, user: User, password_hash: str | None = None) -> None:
        """Create a new user record."""
        if user.id in self._users:
            raise ValueError(f"User {user.id} already exists")
        if user.username is not None and await self.find_by_username(user.username):
            raise ValueError(f"Username {user.username} already exists")
        for record in user.emails:
            if self._owner_of(record.address) is not None:
                raise ValueError(f"Email {record.address} already exists")

        self._users[user.id] = copy.deepcopy(user)
        if password_hash is not None:
            self._password_hashes[user.id] = password_hash

    async def set_password(self, user_id: str, password_hash: str) -> None:
        self._get(user_id)
        self._password_hashes[user_id] = password_hash

    async def set_reset_password(
        self, user_id: str, address: str, password_hash: str, token: str
    ) -> bool:
        """Set the password and drop the consumed token in one step."""
        user = self._get(user_id)
        remaining = [
            record
            for record in user.reset_tokens
            if not (record.token == token and record.address == address)
        ]
        if len(remaining) == len(user.reset_tokens):
            return False
        user.reset_tokens = remaining
        self._password_hashes[user_id] = password_hash
        return True

    async def add_email(self, user_id: str, address: str, verified: bool) -> None:
        user = self._get(user_id)
        owner = self._owner_of(address)
        if owner is not None and owner.id != user_id:
            raise ValueError(f"Email {address} already exists")
        if owner is None:
            user.emails.append(EmailRecord(address=address.lower(), verified=verified))

    async def remove_email(self, user_id: str, address: str) -> None:
        user = self._get(user_id)
        user.emails = [
            record for record in user.emails if record.address != address.lower()
        ]

    async def verify_email(self, user_id: str, address: str, token: str) -> bool:
        """Mark the address verified and drop the consumed token in one step."""
        user = self._get(user_id)
        remaining = [
            record
            for record in user.verification_tokens
            if not (record.token == token and record.address == address)
        ]
        if len(remaining) == len(user.verification_tokens):
            return False
        user.verification_tokens = remaining
        for record in user.emails:
            if record.address == address:
                record.verified = True
        return True

    async def set_profile(self, user_id: str, profile: dict[str, Any]) -> None:
        self._get(user_id).profile = copy.deepcopy(profile)

    async def add_email_verification_token(
        self, user_id: str, address: str, token: str
    ) -> None:
        self._get(user_id).verification_tokens.append(
            SingleUseToken(
                token=token,
                address=address,
                purpose=TokenPurpose.VERIFY_EMAIL,
                created_at=datetime.now(UTC),
            )
        )

    async def add_reset_password_token(
        self, user_id: str, address: str, token: str, purpose: TokenPurpose
    ) -> None:
        self._get(user_id).reset_tokens.append(
            SingleUseToken(
                token=token,
                address=address,
                purpose=purpose,
                created_at=datetime.now(UTC),
            )
        )

    async def remove_tokens(self, user_id: str, tokens: Iterable[str]) -> None:
        user = self._get(user_id)
        doomed = set(tokens)
        user.verification_tokens = [
            record for record in user.verification_tokens if record.token not in doomed
        ]
        user.reset_tokens = [
            record for record in user.reset_tokens if record.token not in doomed
        ]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get(self, user_id: str) -> User:
        try:
            return self._users[user_id]
        except KeyError:
            raise KeyError(f"User {user_id} not found") from None

    def _owner_of(self, address: str) -> User | None:
        address = address.lower()
        for user in self._users.values():
            if any(record.address.lower() == address for record in user.emails):
                return user
        return None

    @staticmethod
    def _copy(user: User | None) -> User | None:
        return copy.deepcopy(user) if user is not None else None
