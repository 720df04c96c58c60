"""Domain value objects."""

from accounts.domain.value_objects.email_message import EmailMessage
from accounts.domain.value_objects.login_identifier import (
    ByEmail,
    ById,
    ByUsername,
    LoginIdentifier,
    parse_login_identifier,
)
from accounts.domain.value_objects.token_pair import TokenPair

__all__ = [
    "ByEmail",
    "ById",
    "ByUsername",
    "EmailMessage",
    "LoginIdentifier",
    "TokenPair",
    "parse_login_identifier",
]
