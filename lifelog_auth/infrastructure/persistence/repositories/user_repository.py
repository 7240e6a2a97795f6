"""SQLAlchemyUserRepository - SQLAlchemy implementation of UserRepository.

Maps between domain User entities and the users table.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lifelog_auth.domain.entities.user import User
from lifelog_auth.infrastructure.persistence.base import ensure_utc
from lifelog_auth.infrastructure.persistence.models.user import User as UserModel


class SQLAlchemyUserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from UserRepository (Protocol uses
    structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = SQLAlchemyUserRepository(session)
        ...     user = await repo.find_by_external_id(google_sub)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_external_id(self, google_id: str) -> User | None:
        """Find user by Google subject id (exact match).

        Args:
            google_id: ``sub`` claim of a verified Google ID token.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(UserModel.google_id == google_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def create(self, *, google_id: str, email: str, name: str) -> User:
        """Insert a new user.

        Raises:
            sqlalchemy.exc.IntegrityError: If google_id is already taken.
        """
        user_model = UserModel(google_id=google_id, email=email, name=name)
        self.session.add(user_model)
        await self.session.commit()
        await self.session.refresh(user_model)
        return self._to_domain(user_model)

    def _to_domain(self, user_model: UserModel) -> User:
        return User(
            id=user_model.id,
            google_id=user_model.google_id,
            email=user_model.email,
            name=user_model.name,
            created_at=ensure_utc(user_model.created_at),
            updated_at=ensure_utc(user_model.updated_at),
        )
