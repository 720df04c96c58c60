"""Token codec error constants.

Plain string constants returned inside Failure by the token codec.
The session manager translates any of them into a TOKENS_INVALID
AccountsError before it reaches a caller.

Usage:
    result = token_service.verify(token)
    match result:
        case Success(value=payload):
            ...
        case Failure(error=AuthenticationError.INVALID_TOKEN):
            ...
"""


class AuthenticationError:
    """Authentication error constants (not exceptions)."""

    INVALID_TOKEN = "Invalid token"
    EXPIRED_TOKEN = "Token expired"
    MALFORMED_TOKEN = "Malformed token"
