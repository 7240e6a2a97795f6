"""Application service factories.

Services that touch the database are session-scoped: build one per unit of
work inside ``get_database().get_session()``.

Usage:
    async with get_database().get_session() as session:
        gateway = build_authentication_gateway(session)
        result = await gateway.refresh(cookie_value)
"""

from sqlalchemy.ext.asyncio import AsyncSession

from lifelog_auth.application.services import (
    AuthenticationGateway,
    OwnershipAuthorizer,
    RefreshTokenLifecycleManager,
)
from lifelog_auth.core.config import get_settings
from lifelog_auth.core.container.infrastructure import (
    get_access_token_issuer,
    get_clock,
    get_identity_verifier,
    get_logger,
    get_token_codec,
)
from lifelog_auth.infrastructure.persistence.repositories import (
    SQLAlchemyRefreshTokenStore,
    SQLAlchemyResourceOwnerRepository,
    SQLAlchemyUserRepository,
)


def build_refresh_token_lifecycle(session: AsyncSession) -> RefreshTokenLifecycleManager:
    """Build a lifecycle manager bound to ``session`` with configured windows."""
    settings = get_settings()
    return RefreshTokenLifecycleManager(
        store=SQLAlchemyRefreshTokenStore(session),
        codec=get_token_codec(),
        clock=get_clock(),
        logger=get_logger(),
        sliding_window=settings.refresh_token_sliding_window,
        absolute_max=settings.refresh_token_absolute_max,
        short_session=settings.refresh_token_short_session,
    )


def build_authentication_gateway(session: AsyncSession) -> AuthenticationGateway:
    return AuthenticationGateway(
        identity_verifier=get_identity_verifier(),
        user_repo=SQLAlchemyUserRepository(session),
        refresh_tokens=build_refresh_token_lifecycle(session),
        access_tokens=get_access_token_issuer(),
        logger=get_logger(),
        google_client_id=get_settings().google_client_id,
    )


def build_ownership_authorizer(session: AsyncSession) -> OwnershipAuthorizer:
    return OwnershipAuthorizer(SQLAlchemyResourceOwnerRepository(session))
