"""Claims carried by a signed access token.

Ephemeral: minted on login and on every successful refresh, never stored.
Validity is purely signature + expiry.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class AccessTokenClaims:
    """Identity asserted by an access token.

    Attributes:
        user_id: Local user id (``sub`` claim).
        email: User's email address.
    """

    user_id: UUID
    email: str
