"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- Database (async SQLAlchemy engine)
- Token codec and access token issuer (PyJWT)
- Clock
- Google identity verification (google-auth)

Each factory is wrapped in ``lru_cache`` so the instance is shared across
the process. Call ``<factory>.cache_clear()`` in tests to rebuild.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from lifelog_auth.core.config import get_settings
from lifelog_auth.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from lifelog_auth.domain.protocols import (
        AccessTokenIssuerProtocol,
        Clock,
        IdentityVerifier,
        LoggerProtocol,
    )
    from lifelog_auth.infrastructure.security.token_codec import TokenCodec


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/production: ConsoleAdapter (JSON)

    ``LOG_JSON`` overrides the environment default.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from lifelog_auth.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use ``get_database().get_session()`` for a transactional session.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_token_codec() -> "TokenCodec":
    from lifelog_auth.infrastructure.security.token_codec import TokenCodec

    return TokenCodec(algorithm=get_settings().jwt_algorithm)


@lru_cache()
def get_clock() -> "Clock":
    from lifelog_auth.infrastructure.clock.system_clock import SystemClock

    return SystemClock()


@lru_cache()
def get_access_token_issuer() -> "AccessTokenIssuerProtocol":
    """Get access token issuer singleton (app-scoped).

    Raises:
        ValueError: If the configured signing key is too short.
    """
    from lifelog_auth.infrastructure.security.access_token_issuer import (
        AccessTokenIssuer,
    )

    settings = get_settings()
    return AccessTokenIssuer(
        get_token_codec(),
        get_clock(),
        secret_key=settings.jwt_secret,
        ttl_seconds=settings.access_token_expire_seconds,
    )


@lru_cache()
def get_identity_verifier() -> "IdentityVerifier":
    from lifelog_auth.infrastructure.identity.google_identity_verifier import (
        GoogleIdentityVerifier,
    )

    return GoogleIdentityVerifier(get_logger())
