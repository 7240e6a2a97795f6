"""Security adapters: token codec and access token issuer."""

from lifelog_auth.infrastructure.security.access_token_issuer import AccessTokenIssuer
from lifelog_auth.infrastructure.security.token_codec import TokenCodec

__all__ = ["AccessTokenIssuer", "TokenCodec"]
