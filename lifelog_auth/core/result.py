"""Result types for railway-oriented programming.

Operations with an expected failure mode return a Result instead of raising.
Infrastructure faults (database unreachable, etc.) are still exceptions.

Usage:
    result = await lifecycle.rotate(token_id, metadata)
    match result:
        case Success(value=secret):
            ...
        case Failure(error=RefreshTokenError.TOKEN_NOT_FOUND):
            ...
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
