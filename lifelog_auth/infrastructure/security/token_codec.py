"""Token codec.

Cryptographic primitives shared by refresh and access tokens.

Refresh Token Strategy:
    - Opaque tokens (NOT JWT)
    - 32-byte random string (urlsafe base64), CSPRNG via ``secrets``
    - SHA-256 hex digest stored as the lookup key. Deterministic on purpose:
      the digest IS the index, so lookup is a single equality match. The
      secret carries 256 bits of entropy, so a fast hash is not brute-forceable.

Access Token Strategy:
    - HMAC-SHA256 (HS256) JWT via PyJWT
    - Claims: sub (user id), email, iat, exp, jti
    - Expiry is judged against a caller-supplied ``now``, not the wall clock
    - Verification fails closed: any problem is a Failure, never an exception
"""

import hashlib
import secrets
from datetime import datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from lifelog_auth.core.result import Failure, Result, Success
from lifelog_auth.domain.errors import AuthenticationError
from lifelog_auth.domain.value_objects import AccessTokenClaims


class TokenCodec:
    """Secret generation, hashing, and access token signing.

    Usage:
        codec = TokenCodec()

        secret = codec.generate_secret()
        token_hash = codec.hash_secret(secret)  # store this, return secret

        token = codec.sign_access_token(claims, signing_key, 900, issued_at=now)
        result = codec.verify_access_token(token, signing_key, now=now)
    """

    def __init__(self, algorithm: str = "HS256") -> None:
        """Initialize codec.

        Args:
            algorithm: JWT signing algorithm (HMAC family).
        """
        self._algorithm = algorithm

    def generate_secret(self) -> str:
        """Generate an opaque refresh token secret.

        Returns:
            URL-safe base64 string (~43 characters, 256 bits of entropy).
        """
        return secrets.token_urlsafe(32)

    def hash_secret(self, secret: str) -> str:
        """Hash a secret for storage and lookup.

        Returns:
            64-character lowercase hex SHA-256 digest.
        """
        return hashlib.sha256(secret.encode("utf-8")).hexdigest()

    def sign_access_token(
        self,
        claims: AccessTokenClaims,
        secret: str,
        ttl_seconds: int,
        *,
        issued_at: datetime,
    ) -> str:
        """Sign an access token.

        Args:
            claims: Identity to embed.
            secret: HMAC signing key.
            ttl_seconds: Lifetime from ``issued_at``.
            issued_at: Issuance time (UTC).

        Returns:
            Compact JWT (header.payload.signature).
        """
        expires_at = issued_at + timedelta(seconds=ttl_seconds)
        payload = {
            "sub": str(claims.user_id),
            "email": claims.email,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }
        token: str = jwt.encode(payload, secret, algorithm=self._algorithm)
        return token

    def verify_access_token(
        self, token: str, secret: str, *, now: datetime
    ) -> Result[AccessTokenClaims, str]:
        """Verify signature and expiry, then extract claims.

        Expiry is checked against ``now`` rather than the wall clock, so the
        caller's Clock decides when a token lapses.

        Args:
            token: Compact JWT.
            secret: HMAC signing key.
            now: Current time (UTC).

        Returns:
            Success(AccessTokenClaims) or Failure(AuthenticationError.INVALID_TOKEN).
        """
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self._algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["exp", "sub", "email"],
                },
            )
            # Same boundary as PyJWT: dead at exp.
            if int(now.timestamp()) >= int(payload["exp"]):
                return Failure(error=AuthenticationError.INVALID_TOKEN)
            return Success(
                value=AccessTokenClaims(
                    user_id=UUID(payload["sub"]),
                    email=payload["email"],
                )
            )
        except (InvalidTokenError, ValueError, TypeError):
            # Invalid, malformed, or sub is not a UUID
            return Failure(error=AuthenticationError.INVALID_TOKEN)
