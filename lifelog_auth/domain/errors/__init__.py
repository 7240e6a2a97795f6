"""Domain errors package.

Error value constants used in Result types. These are NOT exceptions.

Usage:
    from lifelog_auth.domain.errors import AuthenticationError, RefreshTokenError
"""

from lifelog_auth.domain.errors.authentication_error import AuthenticationError
from lifelog_auth.domain.errors.ownership_error import OwnershipError, OwnershipErrorCode
from lifelog_auth.domain.errors.refresh_token_error import RefreshTokenError

__all__ = [
    "AuthenticationError",
    "OwnershipError",
    "OwnershipErrorCode",
    "RefreshTokenError",
]
