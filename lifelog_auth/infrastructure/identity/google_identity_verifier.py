"""Google ID token verifier (implements IdentityVerifier).

Uses ``google.oauth2.id_token.verify_oauth2_token`` with the configured
OAuth client id as audience. The client sends the ``id_token`` obtained
from Google Sign-In.

google-auth is synchronous (it may fetch Google's signing certificates over
HTTP), so verification runs in a worker thread.

Failure policy:
    Every failure (network, malformed token, bad signature, audience or
    issuer mismatch, missing profile fields) collapses to None. The reason
    is logged, never raised.
"""

import asyncio
from typing import Any

from google.auth.transport import requests as google_requests
from google.oauth2 import id_token

from lifelog_auth.domain.protocols import LoggerProtocol
from lifelog_auth.domain.value_objects import IdentityClaims

GOOGLE_ISSUERS = frozenset({"https://accounts.google.com", "accounts.google.com"})


class GoogleIdentityVerifier:
    """Verify Google ID tokens and extract the user's profile.

    Usage:
        verifier = GoogleIdentityVerifier(logger)
        claims = await verifier.verify(raw_id_token, settings.google_client_id)
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        *,
        clock_skew_seconds: int = 10,
    ) -> None:
        """Initialize verifier.

        Args:
            logger: Structured logger.
            clock_skew_seconds: Tolerated clock drift for iat/exp checks.
        """
        self._logger = logger
        self._clock_skew_seconds = clock_skew_seconds
        self._request = google_requests.Request()

    async def verify(
        self, identity_token: str, expected_audience: str
    ) -> IdentityClaims | None:
        """Verify ``identity_token`` for ``expected_audience``.

        Returns:
            IdentityClaims if valid and complete, None otherwise.
        """
        if not identity_token or not expected_audience:
            return None

        try:
            payload = await asyncio.to_thread(
                self._verify_sync, identity_token, expected_audience
            )
        except Exception as e:
            # google-auth raises ValueError, GoogleAuthError, TransportError...
            self._logger.warning(
                "google_id_token_rejected",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return None

        if payload.get("iss") not in GOOGLE_ISSUERS:
            self._logger.warning("google_id_token_rejected", reason="issuer")
            return None

        subject_id = payload.get("sub")
        email = payload.get("email")
        name = payload.get("name")
        if not subject_id or not email or not name:
            self._logger.warning("google_id_token_rejected", reason="incomplete_profile")
            return None

        return IdentityClaims(
            subject_id=str(subject_id),
            email=str(email),
            display_name=str(name),
        )

    def _verify_sync(self, identity_token: str, audience: str) -> dict[str, Any]:
        payload: dict[str, Any] = id_token.verify_oauth2_token(
            identity_token,
            self._request,
            audience,
            clock_skew_in_seconds=self._clock_skew_seconds,
        )
        return payload
