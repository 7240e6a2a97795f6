"""Value objects exchanged with the refresh token lifecycle."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class TokenMetadata:
    """Client metadata captured when a refresh token is issued.

    Attributes:
        user_agent: Opaque user-agent string (diagnostics only).
        remember_me: Grant the full sliding window instead of the short
            session window.
    """

    user_agent: str | None = None
    remember_me: bool = False


@dataclass(frozen=True, kw_only=True)
class ValidatedRefreshToken:
    """Identity pair resolved from a valid refresh token.

    Attributes:
        user_id: Token owner.
        token_id: Record id, used for the follow-up rotation.
    """

    user_id: UUID
    token_id: UUID
