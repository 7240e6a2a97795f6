"""Refresh token lifecycle manager.

State machine for opaque, database-backed refresh tokens:

    issue ──► validate (0..n, each may extend expires_at) ──► deleted
                                   │
                                   └──► rotate (delete old, issue new)

Termination is always a deletion: sliding-window lapse, absolute-cap lapse,
rotation, single revocation or bulk revocation. A deleted secret can never
be replayed.

Architecture:
    - Application service, depends on domain ports only
    - Store, codec and clock injected; durations passed explicitly
    - No in-process caching: every call reads the store, so multiple
      service instances can run side by side
    - Store errors propagate unmodified (no retries here)

Concurrency:
    validate and rotate are lookup-then-mutate and not atomic against a
    concurrent call on the same secret. The store's conditional delete
    decides the winner of concurrent rotations; the loser gets
    RefreshTokenError.TOKEN_NOT_FOUND and must force re-authentication.
"""

from datetime import timedelta
from uuid import UUID

from uuid_extensions import uuid7

from lifelog_auth.core.result import Failure, Result, Success
from lifelog_auth.domain.entities.refresh_token import RefreshTokenRecord
from lifelog_auth.domain.errors import RefreshTokenError
from lifelog_auth.domain.protocols import (
    Clock,
    LoggerProtocol,
    RefreshTokenStore,
    SecretCodecProtocol,
)
from lifelog_auth.domain.value_objects import TokenMetadata, ValidatedRefreshToken


class RefreshTokenLifecycleManager:
    """Issue, validate, rotate and revoke refresh tokens.

    Dual expiry:
        - expires_at slides forward by ``sliding_window`` on each validation
        - absolute_expires_at is fixed at issuance (``absolute_max``)
        - the slide is clamped to the absolute cap

    Example:
        >>> manager = RefreshTokenLifecycleManager(
        ...     store=store,
        ...     codec=TokenCodec(),
        ...     clock=SystemClock(),
        ...     logger=logger,
        ... )
        >>> secret = await manager.issue(user_id, TokenMetadata(remember_me=True))
        >>> validated = await manager.validate(secret)
        >>> if validated is not None:
        ...     result = await manager.rotate(validated.token_id, TokenMetadata())
    """

    def __init__(
        self,
        store: RefreshTokenStore,
        codec: SecretCodecProtocol,
        clock: Clock,
        logger: LoggerProtocol,
        *,
        sliding_window: timedelta = timedelta(days=7),
        absolute_max: timedelta = timedelta(days=30),
        short_session: timedelta = timedelta(days=1),
    ) -> None:
        """Initialize the lifecycle manager.

        Args:
            store: Refresh token persistence port.
            codec: Secret generation and hashing.
            clock: Current-time source.
            logger: Structured logger.
            sliding_window: Inactivity window granted on remember-me issuance
                and on every successful validation.
            absolute_max: Hard cap on a token's lifetime.
            short_session: Initial inactivity window without remember-me.

        Raises:
            ValueError: If a duration is not positive or the absolute cap is
                shorter than a window.
        """
        for name, value in (
            ("sliding_window", sliding_window),
            ("absolute_max", absolute_max),
            ("short_session", short_session),
        ):
            if value <= timedelta(0):
                msg = f"{name} must be positive"
                raise ValueError(msg)
        if absolute_max < max(sliding_window, short_session):
            msg = "absolute_max must be >= sliding_window and short_session"
            raise ValueError(msg)

        self._store = store
        self._codec = codec
        self._clock = clock
        self._logger = logger
        self._sliding_window = sliding_window
        self._absolute_max = absolute_max
        self._short_session = short_session

    async def issue(
        self,
        user_id: UUID,
        metadata: TokenMetadata | None = None,
        remember_me: bool | None = None,
    ) -> str:
        """Issue a new refresh token for ``user_id``.

        Args:
            user_id: Token owner.
            metadata: Client metadata (user agent, remember-me preference).
            remember_me: Overrides ``metadata.remember_me`` when given.

        Returns:
            The plaintext secret. It is returned exactly once; only its hash
            is persisted.
        """
        metadata = metadata or TokenMetadata()
        if remember_me is None:
            remember_me = metadata.remember_me

        secret = self._codec.generate_secret()
        now = self._clock.now()
        absolute_expires_at = now + self._absolute_max
        window = self._sliding_window if remember_me else self._short_session

        record = RefreshTokenRecord(
            id=uuid7(),
            token_hash=self._codec.hash_secret(secret),
            user_id=user_id,
            expires_at=min(now + window, absolute_expires_at),
            absolute_expires_at=absolute_expires_at,
            created_at=now,
            is_active=True,
            user_agent=metadata.user_agent,
        )
        stored = await self._store.create(record)

        self._logger.info(
            "refresh_token_issued",
            user_id=str(user_id),
            token_id=str(stored.id),
            remember_me=remember_me,
            expires_at=stored.expires_at.isoformat(),
        )
        return secret

    async def validate(self, secret: str) -> ValidatedRefreshToken | None:
        """Validate a presented secret and slide its expiry.

        Flow:
        1. Look up by hash. Not found -> None.
        2. Absolute cap lapsed -> delete, None. Checked first so a token at
           the cap is never granted one more slide.
        3. Sliding window lapsed -> delete, None.
        4. Extend expires_at (clamped), stamp last_used_at, persist.

        Args:
            secret: Plaintext refresh token from the client.

        Returns:
            ValidatedRefreshToken on success, None for any "no session" case.
        """
        record = await self._store.find_by_hash(self._codec.hash_secret(secret))
        if record is None:
            self._logger.debug("refresh_token_unknown")
            return None

        now = self._clock.now()

        if record.is_absolutely_expired(now):
            await self._store.delete(record.id)
            self._logger.info(
                "refresh_token_expired",
                reason="absolute",
                user_id=str(record.user_id),
                token_id=str(record.id),
            )
            return None

        if record.is_idle_expired(now):
            await self._store.delete(record.id)
            self._logger.info(
                "refresh_token_expired",
                reason="inactivity",
                user_id=str(record.user_id),
                token_id=str(record.id),
            )
            return None

        touched = record.touched(now, self._sliding_window)
        if not await self._store.update(touched):
            # Row vanished between lookup and update (concurrent rotation).
            self._logger.warning(
                "refresh_token_vanished_during_validation",
                user_id=str(record.user_id),
                token_id=str(record.id),
            )
            return None

        return ValidatedRefreshToken(user_id=record.user_id, token_id=record.id)

    async def rotate(
        self, old_token_id: UUID, metadata: TokenMetadata | None = None
    ) -> Result[str, str]:
        """Replace a validated token with a freshly issued one.

        The old row is deleted and a new row (new id, new hash, expiry
        computed from now) is created for the same user. Expiry is never
        copied from the old row.

        Args:
            old_token_id: Id returned by ``validate``.
            metadata: Client metadata for the new token.

        Returns:
            Success(new plaintext secret), or
            Failure(RefreshTokenError.TOKEN_NOT_FOUND) if the row is gone or a
            concurrent rotation deleted it first.
        """
        old = await self._store.find_by_id(old_token_id)
        if old is None:
            self._logger.warning(
                "refresh_token_rotation_conflict",
                token_id=str(old_token_id),
                reason="not_found",
            )
            return Failure(error=RefreshTokenError.TOKEN_NOT_FOUND)

        if not await self._store.delete(old.id):
            self._logger.warning(
                "refresh_token_rotation_conflict",
                user_id=str(old.user_id),
                token_id=str(old_token_id),
                reason="lost_race",
            )
            return Failure(error=RefreshTokenError.TOKEN_NOT_FOUND)

        secret = await self.issue(old.user_id, metadata)
        self._logger.info(
            "refresh_token_rotated",
            user_id=str(old.user_id),
            old_token_id=str(old_token_id),
        )
        return Success(value=secret)

    async def revoke_one(self, secret: str) -> None:
        """Revoke a single token by its secret. Idempotent."""
        deleted = await self._store.delete_by_hash(self._codec.hash_secret(secret))
        self._logger.info("refresh_token_revoked", deleted=deleted)

    async def revoke_all_for_user(self, user_id: UUID) -> None:
        """Revoke every token of ``user_id`` (log out of all devices). Idempotent."""
        deleted = await self._store.delete_all_for_user(user_id)
        self._logger.info(
            "refresh_tokens_revoked_for_user",
            user_id=str(user_id),
            deleted=deleted,
        )

    async def purge_expired(self, grace: timedelta = timedelta(hours=24)) -> int:
        """Delete tokens whose sliding expiry lapsed more than ``grace`` ago.

        Housekeeping only: lapsed tokens are already rejected (and deleted)
        by ``validate``. Since expires_at never exceeds absolute_expires_at,
        the sliding expiry alone identifies every dead row.

        Args:
            grace: How long lapsed rows are kept.

        Returns:
            Number of deleted rows.
        """
        cutoff = self._clock.now() - grace
        deleted = await self._store.delete_expired(cutoff)
        self._logger.info(
            "expired_refresh_tokens_purged",
            deleted=deleted,
            cutoff=cutoff.isoformat(),
        )
        return deleted
