"""Access/refresh token pair returned on login and refresh."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenPair:
    """Signed bearer tokens.

    Attributes:
        access_token: Short-lived token carrying the session id.
        refresh_token: Longer-lived token used only to mint a new pair.
    """

    access_token: str
    refresh_token: str
