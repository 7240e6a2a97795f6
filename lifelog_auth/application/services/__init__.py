"""Application services.

Usage:
    from lifelog_auth.application.services import (
        AuthenticationGateway,
        OwnershipAuthorizer,
        RefreshTokenLifecycleManager,
    )
"""

from lifelog_auth.application.services.authentication_gateway import (
    AuthenticationGateway,
    AuthTokens,
)
from lifelog_auth.application.services.ownership_authorizer import OwnershipAuthorizer
from lifelog_auth.application.services.refresh_token_lifecycle import (
    RefreshTokenLifecycleManager,
)

__all__ = [
    "AuthTokens",
    "AuthenticationGateway",
    "OwnershipAuthorizer",
    "RefreshTokenLifecycleManager",
]
