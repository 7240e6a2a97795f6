"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance
(PEP 544 structural typing).

Usage:
    from lifelog_auth.domain.protocols import RefreshTokenStore, Clock
"""

from lifelog_auth.domain.protocols.clock_protocol import Clock
from lifelog_auth.domain.protocols.identity_verifier_protocol import IdentityVerifier
from lifelog_auth.domain.protocols.logger_protocol import LoggerProtocol
from lifelog_auth.domain.protocols.refresh_token_store import RefreshTokenStore
from lifelog_auth.domain.protocols.resource_owner_repository import (
    ResourceOwnerRepository,
)
from lifelog_auth.domain.protocols.token_codec_protocol import (
    AccessTokenCodecProtocol,
    AccessTokenIssuerProtocol,
    SecretCodecProtocol,
)
from lifelog_auth.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "AccessTokenCodecProtocol",
    "AccessTokenIssuerProtocol",
    "Clock",
    "IdentityVerifier",
    "LoggerProtocol",
    "SecretCodecProtocol",
    # Repository protocols
    "RefreshTokenStore",
    "ResourceOwnerRepository",
    "UserRepository",
]
