"""Authentication gateway.

Orchestrates the sign-in and teardown paths around the refresh token
lifecycle:

Login:
1. Verify the Google ID token (IdentityVerifier)
2. Find or create the local user by Google subject id
3. Issue a refresh token
4. Issue an access token
5. Return Success(AuthTokens)

Refresh:
1. Validate the presented refresh token (slides its expiry)
2. Resolve the user
3. Rotate the refresh token (old one deleted)
4. Issue an access token
5. Return Success(AuthTokens)

Logout / logout everywhere: revoke one / all refresh tokens.

How each token reaches the client (cookie vs. response body) is decided by
the transport layer, not here.

Error policy:
    Every refresh failure short of an infrastructure error is returned as
    Failure(AuthenticationError.REAUTHENTICATION_REQUIRED). The concrete
    reason is logged for operators and never returned, so callers cannot
    tell unknown, expired, rotated and tampered tokens apart.
"""

from dataclasses import dataclass
from uuid import UUID

from lifelog_auth.application.services.refresh_token_lifecycle import (
    RefreshTokenLifecycleManager,
)
from lifelog_auth.core.result import Failure, Result, Success
from lifelog_auth.domain.entities.user import User
from lifelog_auth.domain.errors import AuthenticationError
from lifelog_auth.domain.protocols import (
    AccessTokenIssuerProtocol,
    IdentityVerifier,
    LoggerProtocol,
    UserRepository,
)
from lifelog_auth.domain.value_objects import AccessTokenClaims, TokenMetadata


@dataclass(frozen=True, kw_only=True)
class AuthTokens:
    """Token pair returned by login and refresh.

    Attributes:
        access_token: Signed short-lived access token (keep in memory).
        refresh_token: Opaque refresh secret (httpOnly cookie or secure storage).
        user: The authenticated user.
        expires_in: Access token lifetime in seconds.
        token_type: Always "bearer".
    """

    access_token: str
    refresh_token: str
    user: User
    expires_in: int
    token_type: str = "bearer"


class AuthenticationGateway:
    """Login, refresh, logout and current-user resolution.

    Dependencies (injected via constructor):
        - IdentityVerifier: Google ID token verification
        - UserRepository: local user lookup/provisioning
        - RefreshTokenLifecycleManager: refresh token state machine
        - AccessTokenIssuerProtocol: access token signing/verification
    """

    def __init__(
        self,
        identity_verifier: IdentityVerifier,
        user_repo: UserRepository,
        refresh_tokens: RefreshTokenLifecycleManager,
        access_tokens: AccessTokenIssuerProtocol,
        logger: LoggerProtocol,
        *,
        google_client_id: str,
    ) -> None:
        """Initialize the gateway.

        Args:
            identity_verifier: External identity verification port.
            user_repo: Local user repository.
            refresh_tokens: Refresh token lifecycle manager.
            access_tokens: Access token issuer.
            logger: Structured logger.
            google_client_id: Expected audience of Google ID tokens.
        """
        self._identity_verifier = identity_verifier
        self._user_repo = user_repo
        self._refresh_tokens = refresh_tokens
        self._access_tokens = access_tokens
        self._logger = logger
        self._google_client_id = google_client_id

    async def login(
        self,
        identity_token: str,
        metadata: TokenMetadata | None = None,
        remember_me: bool = False,
    ) -> Result[AuthTokens, str]:
        """Sign in with a Google ID token.

        Args:
            identity_token: ID token obtained by the client from Google.
            metadata: Client metadata captured on the refresh token.
            remember_me: Grant the full sliding window on the first token.

        Returns:
            Success(AuthTokens) or Failure(AuthenticationError.INVALID_IDENTITY_TOKEN).
        """
        identity = await self._identity_verifier.verify(
            identity_token, self._google_client_id
        )
        if identity is None:
            self._logger.info("login_failed", reason="identity_rejected")
            return Failure(error=AuthenticationError.INVALID_IDENTITY_TOKEN)

        user = await self._user_repo.find_by_external_id(identity.subject_id)
        if user is None:
            user = await self._user_repo.create(
                google_id=identity.subject_id,
                email=identity.email,
                name=identity.display_name,
            )
            self._logger.info("user_provisioned", user_id=str(user.id))

        refresh_token = await self._refresh_tokens.issue(
            user.id, metadata, remember_me=remember_me
        )
        self._logger.info("login_succeeded", user_id=str(user.id))
        return Success(value=self._tokens_for(user, refresh_token))

    async def refresh(
        self,
        presented_secret: str | None,
        metadata: TokenMetadata | None = None,
    ) -> Result[AuthTokens, str]:
        """Exchange a refresh token for a new token pair.

        The presented token is single-use: on success it has been deleted and
        replaced. On failure the caller must treat the session as ended and
        must not retry with the same secret.

        Args:
            presented_secret: Refresh token from cookie or request body.
            metadata: Client metadata for the replacement token.

        Returns:
            Success(AuthTokens) or
            Failure(AuthenticationError.REAUTHENTICATION_REQUIRED).
        """
        if not presented_secret:
            return self._session_ended("missing_token")

        validated = await self._refresh_tokens.validate(presented_secret)
        if validated is None:
            return self._session_ended("invalid_or_expired")

        user = await self._user_repo.find_by_id(validated.user_id)
        if user is None:
            # Orphaned token: burn it so it cannot be presented again.
            await self._refresh_tokens.revoke_one(presented_secret)
            return self._session_ended("user_not_found", user_id=validated.user_id)

        rotated = await self._refresh_tokens.rotate(validated.token_id, metadata)
        match rotated:
            case Failure(error=error):
                return self._session_ended(error, user_id=user.id)
            case Success(value=new_secret):
                self._logger.info("refresh_succeeded", user_id=str(user.id))
                return Success(value=self._tokens_for(user, new_secret))

    async def logout(self, presented_secret: str | None) -> None:
        """Revoke the presented refresh token.

        Tolerates a missing, unknown or already expired secret.
        """
        if not presented_secret:
            return
        await self._refresh_tokens.revoke_one(presented_secret)

    async def logout_everywhere(self, user_id: UUID) -> None:
        """Revoke every refresh token of ``user_id``."""
        await self._refresh_tokens.revoke_all_for_user(user_id)

    async def authenticate(self, access_token: str | None) -> User | None:
        """Resolve the user behind a bearer access token.

        Absence of a session is not an error: an invalid, expired or
        orphaned token simply yields None, leaving the decision to the
        authorization layer.

        Args:
            access_token: Raw bearer token (without the "Bearer " prefix).

        Returns:
            The authenticated user, or None.
        """
        if not access_token:
            return None

        claims = self._access_tokens.verify(access_token)
        if claims is None:
            return None

        return await self._user_repo.find_by_id(claims.user_id)

    def _tokens_for(self, user: User, refresh_token: str) -> AuthTokens:
        access_token = self._access_tokens.issue(
            AccessTokenClaims(user_id=user.id, email=user.email)
        )
        return AuthTokens(
            access_token=access_token,
            refresh_token=refresh_token,
            user=user,
            expires_in=self._access_tokens.ttl_seconds,
        )

    def _session_ended(
        self, reason: str, *, user_id: UUID | None = None
    ) -> Failure[str]:
        self._logger.info(
            "refresh_failed",
            reason=reason,
            user_id=str(user_id) if user_id else None,
        )
        return Failure(error=AuthenticationError.REAUTHENTICATION_REQUIRED)
