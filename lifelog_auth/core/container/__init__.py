"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from lifelog_auth.core.container import get_logger, build_authentication_gateway

The container is organized into modules:
- infrastructure: Application-scoped singletons (logger, database, codec, ...)
- services: Session-scoped application services
- jobs: Scheduled maintenance entry points
"""

from lifelog_auth.core.container.infrastructure import (
    get_access_token_issuer,
    get_clock,
    get_database,
    get_identity_verifier,
    get_logger,
    get_token_codec,
)
from lifelog_auth.core.container.jobs import run_token_cleanup
from lifelog_auth.core.container.services import (
    build_authentication_gateway,
    build_ownership_authorizer,
    build_refresh_token_lifecycle,
)

__all__ = [
    # Infrastructure
    "get_access_token_issuer",
    "get_clock",
    "get_database",
    "get_identity_verifier",
    "get_logger",
    "get_token_codec",
    # Services
    "build_authentication_gateway",
    "build_ownership_authorizer",
    "build_refresh_token_lifecycle",
    # Jobs
    "run_token_cleanup",
]
