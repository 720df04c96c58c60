"""Authentication DTOs returned by login and refresh."""

from dataclasses import dataclass

from accounts.domain.entities.user import User
from accounts.domain.value_objects.token_pair import TokenPair


@dataclass(frozen=True, slots=True, kw_only=True)
class LoginResult:
    """Successful login or refresh.

    Attributes:
        session_id: Session the tokens are bound to.
        user: Owning user (no password material).
        tokens: Freshly minted access/refresh pair.
    """

    session_id: str
    user: User
    tokens: TokenPair
