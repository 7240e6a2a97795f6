"""Resource ownership authorization errors."""

from dataclasses import dataclass


class OwnershipErrorCode:
    """Standard ownership error codes."""

    NOT_AUTHENTICATED = "not_authenticated"
    RESOURCE_NOT_FOUND = "resource_not_found"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True, kw_only=True)
class OwnershipError:
    """Ownership verification error details.

    Attributes:
        code: Error code for programmatic handling (OwnershipErrorCode).
        message: Human-readable error message.
    """

    code: str
    message: str
