"""Result types for railway-oriented programming.

Every accounts operation that can fail for a business reason returns a
Result instead of raising. Callers branch with structural pattern matching.

Usage:
    result = await server.login("ann", "Secret1!")
    match result:
        case Success(value=login):
            print(login.session_id)
        case Failure(error=error):
            print(error.code, error.status_code)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
