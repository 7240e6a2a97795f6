"""SQLAlchemyRefreshTokenStore - SQLAlchemy implementation of RefreshTokenStore.

Every mutation is a single DML statement committed immediately, so the
row count reported by the database is the source of truth for "who won".
Two sessions racing to delete the same id both issue
``DELETE ... WHERE id = :id``; the database serializes them and only one
sees rowcount == 1.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lifelog_auth.domain.entities.refresh_token import RefreshTokenRecord
from lifelog_auth.infrastructure.persistence.base import ensure_utc
from lifelog_auth.infrastructure.persistence.models.refresh_token import RefreshToken


def _to_domain(model: RefreshToken) -> RefreshTokenRecord:
    """Convert database model to domain entity."""
    return RefreshTokenRecord(
        id=model.id,
        token_hash=model.token_hash,
        user_id=model.user_id,
        expires_at=ensure_utc(model.expires_at),
        absolute_expires_at=ensure_utc(model.absolute_expires_at),
        created_at=ensure_utc(model.created_at),
        is_active=model.is_active,
        user_agent=model.user_agent,
        last_used_at=(
            ensure_utc(model.last_used_at) if model.last_used_at else None
        ),
    )


class SQLAlchemyRefreshTokenStore:
    """SQLAlchemy implementation of RefreshTokenStore protocol.

    This class does NOT inherit from RefreshTokenStore (Protocol uses
    structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     store = SQLAlchemyRefreshTokenStore(session)
        ...     record = await store.find_by_hash(token_hash)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize store with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, record: RefreshTokenRecord) -> RefreshTokenRecord:
        model = RefreshToken(
            id=record.id,
            token_hash=record.token_hash,
            user_id=record.user_id,
            expires_at=record.expires_at,
            absolute_expires_at=record.absolute_expires_at,
            created_at=record.created_at,
            is_active=record.is_active,
            user_agent=record.user_agent,
            last_used_at=record.last_used_at,
        )
        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)
        return _to_domain(model)

    async def find_by_hash(self, token_hash: str) -> RefreshTokenRecord | None:
        stmt = (
            select(RefreshToken)
            .where(RefreshToken.token_hash == token_hash)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def find_by_id(self, token_id: UUID) -> RefreshTokenRecord | None:
        stmt = (
            select(RefreshToken)
            .where(RefreshToken.id == token_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def update(self, record: RefreshTokenRecord) -> bool:
        """Persist the sliding expiry and last use of an existing token.

        Only ``expires_at`` and ``last_used_at`` are written; every other
        column is immutable after issuance.

        Returns:
            True if the row was updated, False if it no longer exists.
        """
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.id == record.id)
            .values(expires_at=record.expires_at, last_used_at=record.last_used_at)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def delete(self, token_id: UUID) -> bool:
        """Conditionally delete by id.

        Returns:
            True only for the caller whose statement removed the row.
        """
        stmt = delete(RefreshToken).where(RefreshToken.id == token_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount == 1

    async def delete_by_hash(self, token_hash: str) -> int:
        stmt = delete(RefreshToken).where(RefreshToken.token_hash == token_hash)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount

    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Bulk delete every token owned by ``user_id`` (one statement)."""
        stmt = delete(RefreshToken).where(RefreshToken.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount

    async def delete_expired(self, before: datetime) -> int:
        stmt = delete(RefreshToken).where(RefreshToken.expires_at < before)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount
