"""Domain value objects.

Usage:
    from lifelog_auth.domain.value_objects import AccessTokenClaims, TokenMetadata
"""

from lifelog_auth.domain.value_objects.access_token_claims import AccessTokenClaims
from lifelog_auth.domain.value_objects.identity_claims import IdentityClaims
from lifelog_auth.domain.value_objects.token_metadata import (
    TokenMetadata,
    ValidatedRefreshToken,
)

__all__ = [
    "AccessTokenClaims",
    "IdentityClaims",
    "TokenMetadata",
    "ValidatedRefreshToken",
]
