"""Token codec protocols (ports).

Split so the refresh token lifecycle only depends on secret
generation and hashing, the gateway only on access token issuance, and the
issuer only on JWT signing.
"""

from datetime import datetime
from typing import Protocol

from lifelog_auth.core.result import Result
from lifelog_auth.domain.value_objects.access_token_claims import AccessTokenClaims


class SecretCodecProtocol(Protocol):
    """Opaque refresh token secrets."""

    def generate_secret(self) -> str:
        """Generate a URL-safe secret with at least 256 bits of entropy."""
        ...

    def hash_secret(self, secret: str) -> str:
        """One-way, deterministic digest used as the storage lookup key."""
        ...


class AccessTokenIssuerProtocol(Protocol):
    """Stateless access tokens with a fixed TTL."""

    @property
    def ttl_seconds(self) -> int:
        """Lifetime of issued tokens in seconds."""
        ...

    def issue(self, claims: AccessTokenClaims) -> str:
        """Sign an access token carrying ``claims``."""
        ...

    def verify(self, token: str) -> AccessTokenClaims | None:
        """Return the claims of a valid token, None for anything else."""
        ...


class AccessTokenCodecProtocol(Protocol):
    """JWT signing primitives behind the access token issuer."""

    def sign_access_token(
        self,
        claims: AccessTokenClaims,
        secret: str,
        ttl_seconds: int,
        *,
        issued_at: datetime,
    ) -> str:
        """Sign ``claims`` valid for ``ttl_seconds`` from ``issued_at``."""
        ...

    def verify_access_token(
        self, token: str, secret: str, *, now: datetime
    ) -> Result[AccessTokenClaims, str]:
        """Check signature and expiry at ``now``; Failure for anything else."""
        ...
