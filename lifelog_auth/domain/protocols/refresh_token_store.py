"""RefreshTokenStore protocol (port) for the domain layer.

Following hexagonal architecture:
- Domain defines what it needs (protocol/port)
- Infrastructure provides implementation (adapter)
- Domain has no knowledge of how tokens are stored

Concurrency contract:
    ``delete`` is conditional. When two callers race to delete the same id,
    exactly one receives True. Rotation relies on this to make refresh tokens
    single-use under concurrent refresh attempts.

Errors:
    Connectivity or driver errors are raised unmodified; callers add no
    retry logic.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from lifelog_auth.domain.entities.refresh_token import RefreshTokenRecord


class RefreshTokenStore(Protocol):
    """Protocol for refresh token persistence operations.

    Implementations:
        - SQLAlchemyRefreshTokenStore: lifelog_auth/infrastructure/persistence/repositories/
    """

    async def create(self, record: RefreshTokenRecord) -> RefreshTokenRecord:
        """Persist a new refresh token record.

        Args:
            record: Fully populated record (hash only, never plaintext).

        Returns:
            The stored record.
        """
        ...

    async def find_by_hash(self, token_hash: str) -> RefreshTokenRecord | None:
        """Find a record by the SHA-256 digest of its secret.

        Does NOT check expiration; the caller decides.
        """
        ...

    async def find_by_id(self, token_id: UUID) -> RefreshTokenRecord | None:
        """Find a record by primary key."""
        ...

    async def update(self, record: RefreshTokenRecord) -> bool:
        """Persist ``expires_at`` and ``last_used_at`` of an existing record.

        Returns:
            True if the row was updated, False if it no longer exists.
        """
        ...

    async def delete(self, token_id: UUID) -> bool:
        """Conditionally delete a record by id.

        Returns:
            True if this call removed the row, False if it was already gone.
        """
        ...

    async def delete_by_hash(self, token_hash: str) -> int:
        """Delete the record matching ``token_hash``.

        Returns:
            Number of rows removed (0 is not an error).
        """
        ...

    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every record owned by ``user_id`` in one bulk statement.

        Returns:
            Number of rows removed.
        """
        ...

    async def delete_expired(self, before: datetime) -> int:
        """Delete records whose sliding expiry lapsed before ``before``.

        Returns:
            Number of rows removed.
        """
        ...
