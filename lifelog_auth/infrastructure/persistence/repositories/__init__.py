"""SQLAlchemy adapters for the domain repository protocols."""

from lifelog_auth.infrastructure.persistence.repositories.refresh_token_store import (
    SQLAlchemyRefreshTokenStore,
)
from lifelog_auth.infrastructure.persistence.repositories.resource_owner_repository import (
    SQLAlchemyResourceOwnerRepository,
)
from lifelog_auth.infrastructure.persistence.repositories.user_repository import (
    SQLAlchemyUserRepository,
)

__all__ = [
    "SQLAlchemyRefreshTokenStore",
    "SQLAlchemyResourceOwnerRepository",
    "SQLAlchemyUserRepository",
]
