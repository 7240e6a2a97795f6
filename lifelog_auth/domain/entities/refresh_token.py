"""RefreshTokenRecord domain entity.

The only persistent entity owned by the authentication core. A record is
the sole source of truth for session validity: there is no status flag for
"revoked" or "rotated". Every terminal transition is a deletion.

Expiry model:
    - expires_at: sliding expiration, pushed forward on each successful use
    - absolute_expires_at: hard cap set at issuance, never extended
    - expires_at <= absolute_expires_at at all times
"""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class RefreshTokenRecord:
    """Persisted refresh token (hash only, never the plaintext secret).

    Attributes:
        id: Primary key, stable for the life of one token instance.
        token_hash: SHA-256 hex digest of the opaque secret.
        user_id: Owner. A user may hold many concurrent tokens (devices).
        expires_at: Sliding expiration.
        absolute_expires_at: Hard cap, fixed at issuance.
        is_active: Soft-disable flag, True for every created row.
        user_agent: Diagnostic metadata captured at issuance.
        last_used_at: Updated on each successful validation.
        created_at: Issuance timestamp.
    """

    id: UUID
    token_hash: str
    user_id: UUID
    expires_at: datetime
    absolute_expires_at: datetime
    created_at: datetime
    is_active: bool = True
    user_agent: str | None = None
    last_used_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.expires_at > self.absolute_expires_at:
            msg = "expires_at must not exceed absolute_expires_at"
            raise ValueError(msg)

    def is_absolutely_expired(self, now: datetime) -> bool:
        """Check the hard lifetime cap."""
        return self.absolute_expires_at < now

    def is_idle_expired(self, now: datetime) -> bool:
        """Check the sliding (inactivity) window."""
        return self.expires_at < now

    def touched(self, now: datetime, sliding_window: timedelta) -> "RefreshTokenRecord":
        """Return a copy extended by one sliding window as of ``now``.

        The new expiry is clamped to ``absolute_expires_at`` so a token that is
        refreshed near its cap can never outrun it.

        Args:
            now: Validation time.
            sliding_window: Inactivity window to grant from ``now``.

        Returns:
            New record with ``expires_at`` and ``last_used_at`` updated.
        """
        return replace(
            self,
            expires_at=min(now + sliding_window, self.absolute_expires_at),
            last_used_at=now,
        )
