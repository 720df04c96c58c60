"""Login identifier value objects.

A raw login identifier is either a plain string or a selector mapping
with one of ``id``, ``username`` or ``email``. ``parse_login_identifier``
normalizes it into exactly one tagged variant:

    ById(user_id) | ByUsername(username) | ByEmail(email)

Selector priority is id, then username, then email. A plain string is an
email when it parses as one, otherwise a username.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

from accounts.domain.validators import validate_email, validate_username


@dataclass(frozen=True, slots=True)
class ById:
    """Look the user up by id."""

    user_id: str

    def describe(self) -> dict[str, str]:
        return {"id": self.user_id}


@dataclass(frozen=True, slots=True)
class ByUsername:
    """Look the user up by username."""

    username: str

    def describe(self) -> dict[str, str]:
        return {"username": self.username}


@dataclass(frozen=True, slots=True)
class ByEmail:
    """Look the user up by email address (lower-cased)."""

    email: str

    def describe(self) -> dict[str, str]:
        return {"email": self.email}


LoginIdentifier: TypeAlias = ById | ByUsername | ByEmail


def parse_login_identifier(raw: object) -> LoginIdentifier:
    """Normalize a raw identifier into a LoginIdentifier.

    Args:
        raw: Plain string or mapping with ``id``/``username``/``email``.

    Returns:
        The tagged identifier.

    Raises:
        ValueError: If ``raw`` does not parse into any variant.

    Example:
        >>> parse_login_identifier("Ann@X.com")
        ByEmail(email='ann@x.com')
        >>> parse_login_identifier({"username": "ann"})
        ByUsername(username='ann')
    """
    if isinstance(raw, ById | ByUsername | ByEmail):
        return raw

    if isinstance(raw, str):
        try:
            return ByEmail(validate_email(raw))
        except ValueError:
            return ByUsername(validate_username(raw))

    if isinstance(raw, Mapping):
        user_id = raw.get("id")
        if user_id is not None:
            if not isinstance(user_id, str) or not user_id:
                raise ValueError("id must be a non-empty string")
            return ById(user_id)
        if raw.get("username") is not None:
            return ByUsername(validate_username(raw["username"]))
        if raw.get("email") is not None:
            return ByEmail(validate_email(raw["email"]))
        raise ValueError("Selector must contain id, username or email")

    raise ValueError(f"Unsupported login identifier type: {type(raw).__name__}")


def describe_raw_identifier(raw: object) -> dict[str, str] | None:
    """Best-effort identifier echo for error details (never includes secrets)."""
    if isinstance(raw, str):
        return {"user": raw}
    if isinstance(raw, Mapping):
        return {
            key: str(raw[key])
            for key in ("id", "username", "email")
            if raw.get(key) is not None
        } or None
    return None
