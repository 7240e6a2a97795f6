"""IdentityVerifier protocol (port).

Verifies ID tokens issued by an external identity provider (Google).
"""

from typing import Protocol

from lifelog_auth.domain.value_objects.identity_claims import IdentityClaims


class IdentityVerifier(Protocol):
    """Protocol for external identity verification.

    Any failure (network, malformed token, audience or issuer mismatch,
    incomplete profile) MUST collapse to None. Implementations never raise.
    """

    async def verify(
        self, identity_token: str, expected_audience: str
    ) -> IdentityClaims | None:
        """Verify an ID token and extract the profile.

        Args:
            identity_token: Raw ID token sent by the client.
            expected_audience: OAuth client id the token must be issued for.

        Returns:
            IdentityClaims if the token is valid, None otherwise.
        """
        ...
