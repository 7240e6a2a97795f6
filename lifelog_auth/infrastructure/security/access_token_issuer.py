"""Access token issuer (implements AccessTokenIssuerProtocol).

Stateless signing/verification of short-lived access tokens. There is no
revocation path: an access token stays valid until its natural expiry,
which is why the TTL stays short relative to the refresh token cap.

Performance:
    - No database lookup
    - No external service dependencies
"""

from lifelog_auth.core.result import Success
from lifelog_auth.domain.protocols import AccessTokenCodecProtocol, Clock
from lifelog_auth.domain.value_objects import AccessTokenClaims


class AccessTokenIssuer:
    """Issue and verify access tokens with a fixed TTL.

    Usage:
        issuer = AccessTokenIssuer(codec, clock, secret_key=settings.jwt_secret)
        token = issuer.issue(AccessTokenClaims(user_id=user.id, email=user.email))
        claims = issuer.verify(token)  # None when invalid or expired
    """

    def __init__(
        self,
        codec: AccessTokenCodecProtocol,
        clock: Clock,
        *,
        secret_key: str,
        ttl_seconds: int = 900,
    ) -> None:
        """Initialize issuer.

        Args:
            codec: Token codec used for signing.
            clock: Time source for ``iat``/``exp`` and for expiry checks.
            secret_key: HMAC signing key, at least 32 bytes.
            ttl_seconds: Access token lifetime (default: 15 minutes).

        Raises:
            ValueError: If secret_key is too short or ttl_seconds not positive.
        """
        if len(secret_key) < 32:
            msg = "Access token secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        if ttl_seconds <= 0:
            msg = "ttl_seconds must be positive"
            raise ValueError(msg)

        self._codec = codec
        self._clock = clock
        self._secret_key = secret_key
        self._ttl_seconds = ttl_seconds

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    def issue(self, claims: AccessTokenClaims) -> str:
        """Sign an access token for ``claims``."""
        return self._codec.sign_access_token(
            claims,
            self._secret_key,
            self._ttl_seconds,
            issued_at=self._clock.now(),
        )

    def verify(self, token: str) -> AccessTokenClaims | None:
        """Return claims of a valid token, None if invalid or expired."""
        result = self._codec.verify_access_token(
            token, self._secret_key, now=self._clock.now()
        )
        if isinstance(result, Success):
            return result.value
        return None
