"""UserRepository protocol (port)."""

from typing import Protocol
from uuid import UUID

from lifelog_auth.domain.entities.user import User


class UserRepository(Protocol):
    """Protocol for local user persistence.

    Implementations:
        - SQLAlchemyUserRepository: lifelog_auth/infrastructure/persistence/repositories/
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by local id."""
        ...

    async def find_by_external_id(self, google_id: str) -> User | None:
        """Find user by Google subject id."""
        ...

    async def create(self, *, google_id: str, email: str, name: str) -> User:
        """Provision a new user from a verified Google identity.

        Returns:
            The created user.
        """
        ...
