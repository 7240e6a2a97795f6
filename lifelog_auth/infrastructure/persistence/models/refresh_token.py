"""Refresh token database model.

Security:
    - token_hash: SHA-256 hex digest of the secret (NEVER plaintext), unique
    - expires_at: sliding expiration, extended on every successful refresh
    - absolute_expires_at: hard cap set at issuance, never extended
    - No revoked flag: revocation, rotation and expiry all delete the row
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from lifelog_auth.infrastructure.persistence.base import BaseModel


class RefreshToken(BaseModel):
    """Persisted refresh token.

    Token Lifecycle:
        1. Created on login or rotation
        2. Validated zero or more times (expires_at slides, capped)
        3. Deleted on lapse, rotation, logout or logout-everywhere

    Indexes:
        - token_hash (unique): lookup on every refresh
        - user_id: bulk revocation
        - expires_at: housekeeping of lapsed rows
    """

    __tablename__ = "refresh_tokens"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User who owns this refresh token",
    )

    token_hash: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="SHA-256 hex digest of the refresh token (NEVER plaintext)",
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        comment="Sliding expiration, clamped to absolute_expires_at",
    )

    absolute_expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Hard lifetime cap fixed at issuance",
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
    )

    user_agent: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
    )

    last_used_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    __table_args__ = (
        Index("idx_refresh_tokens_token_hash", "token_hash", unique=True),
    )

    def __repr__(self) -> str:
        return (
            f"<RefreshToken("
            f"id={self.id}, "
            f"user_id={self.user_id}, "
            f"expires_at={self.expires_at}"
            f")>"
        )
