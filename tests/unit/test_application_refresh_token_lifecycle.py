"""Unit tests for RefreshTokenLifecycleManager.

Tests cover:
- Issuance (remember-me vs. short session, hashing, metadata)
- Validation (sliding extension, clamping, absolute and inactivity expiry)
- Rotation (single use, concurrent rotation, fresh expiry)
- Revocation (single, bulk, idempotency)
- Housekeeping (purge of lapsed rows)

Architecture:
- In-memory store and mutable clock (tests/fakes.py)
- Real TokenCodec (hashing is deterministic and fast)
"""

import asyncio
from dataclasses import replace
from datetime import timedelta

import pytest
from uuid_extensions import uuid7

from lifelog_auth.application.services import RefreshTokenLifecycleManager
from lifelog_auth.core.result import Failure, Success
from lifelog_auth.domain.errors import RefreshTokenError
from lifelog_auth.domain.value_objects import TokenMetadata
from tests.fakes import T0, InMemoryRefreshTokenStore

DAY = timedelta(days=1)


@pytest.fixture
def manager(token_store, codec, clock, logger) -> RefreshTokenLifecycleManager:
    return RefreshTokenLifecycleManager(
        store=token_store,
        codec=codec,
        clock=clock,
        logger=logger,
        sliding_window=7 * DAY,
        absolute_max=30 * DAY,
        short_session=DAY,
    )


@pytest.fixture
def user_id():
    return uuid7()


def only_record(store: InMemoryRefreshTokenStore):
    assert len(store.records) == 1
    return next(iter(store.records.values()))


@pytest.mark.unit
class TestConstruction:
    """Window validation at construction time."""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"sliding_window": timedelta(0)},
            {"absolute_max": -DAY},
            {"short_session": timedelta(0)},
        ],
    )
    def test_rejects_non_positive_durations(self, token_store, codec, clock, logger, kwargs):
        with pytest.raises(ValueError, match="must be positive"):
            RefreshTokenLifecycleManager(token_store, codec, clock, logger, **kwargs)

    def test_rejects_absolute_cap_shorter_than_window(self, token_store, codec, clock, logger):
        with pytest.raises(ValueError, match="absolute_max"):
            RefreshTokenLifecycleManager(
                token_store,
                codec,
                clock,
                logger,
                sliding_window=10 * DAY,
                absolute_max=5 * DAY,
            )


@pytest.mark.unit
class TestIssue:
    """Tests for issue()."""

    async def test_remember_me_grants_full_sliding_window(self, manager, token_store, user_id):
        await manager.issue(user_id, remember_me=True)

        record = only_record(token_store)
        assert record.expires_at == T0 + 7 * DAY
        assert record.absolute_expires_at == T0 + 30 * DAY

    async def test_without_remember_me_grants_short_session(self, manager, token_store, user_id):
        await manager.issue(user_id, remember_me=False)

        record = only_record(token_store)
        assert record.expires_at == T0 + DAY
        assert record.absolute_expires_at == T0 + 30 * DAY

    async def test_remember_me_read_from_metadata_when_not_given(
        self, manager, token_store, user_id
    ):
        await manager.issue(user_id, TokenMetadata(remember_me=True))

        assert only_record(token_store).expires_at == T0 + 7 * DAY

    async def test_explicit_remember_me_overrides_metadata(self, manager, token_store, user_id):
        await manager.issue(user_id, TokenMetadata(remember_me=True), remember_me=False)

        assert only_record(token_store).expires_at == T0 + DAY

    async def test_stores_only_hash_of_returned_secret(
        self, manager, token_store, codec, user_id
    ):
        secret = await manager.issue(user_id)

        record = only_record(token_store)
        assert record.token_hash == codec.hash_secret(secret)
        assert record.token_hash != secret
        assert len(record.token_hash) == 64

    async def test_captures_metadata_and_timestamps(self, manager, token_store, user_id):
        await manager.issue(user_id, TokenMetadata(user_agent="Firefox/130"))

        record = only_record(token_store)
        assert record.user_id == user_id
        assert record.user_agent == "Firefox/130"
        assert record.created_at == T0
        assert record.last_used_at is None
        assert record.is_active is True

    async def test_each_issue_creates_independent_row(self, manager, token_store, user_id):
        first = await manager.issue(user_id)
        second = await manager.issue(user_id)

        assert first != second
        assert len(token_store.for_user(user_id)) == 2

    async def test_window_is_clamped_when_cap_is_shorter(
        self, token_store, codec, clock, logger, user_id
    ):
        manager = RefreshTokenLifecycleManager(
            token_store,
            codec,
            clock,
            logger,
            sliding_window=7 * DAY,
            absolute_max=7 * DAY,
        )

        await manager.issue(user_id, remember_me=True)

        record = only_record(token_store)
        assert record.expires_at == record.absolute_expires_at == T0 + 7 * DAY

    async def test_logs_issuance_without_secret(self, manager, logger, user_id):
        secret = await manager.issue(user_id)

        context = logger.find("refresh_token_issued")
        assert context is not None
        assert context["user_id"] == str(user_id)
        assert secret not in str(logger.entries)


@pytest.mark.unit
class TestValidate:
    """Tests for validate()."""

    async def test_unknown_secret_returns_none(self, manager, token_store):
        assert await manager.validate("not-a-real-secret") is None
        assert token_store.records == {}

    async def test_valid_secret_returns_identity_pair(self, manager, token_store, user_id):
        secret = await manager.issue(user_id)
        record = only_record(token_store)

        validated = await manager.validate(secret)

        assert validated is not None
        assert validated.user_id == user_id
        assert validated.token_id == record.id

    async def test_sliding_extension_from_now(self, manager, token_store, clock, user_id):
        secret = await manager.issue(user_id, remember_me=True)

        clock.set(T0 + 6 * DAY)
        await manager.validate(secret)

        record = only_record(token_store)
        assert record.expires_at == T0 + 13 * DAY
        assert record.last_used_at == T0 + 6 * DAY
        assert record.absolute_expires_at == T0 + 30 * DAY

    async def test_extension_clamped_to_absolute_cap(self, manager, token_store, clock, user_id):
        """Refreshing every few days keeps the token alive, but only up to the cap."""
        secret = await manager.issue(user_id, remember_me=True)

        clock.set(T0 + 6 * DAY)
        assert await manager.validate(secret) is not None
        assert only_record(token_store).expires_at == T0 + 13 * DAY

        for day in (12, 18, 24, 29):
            clock.set(T0 + day * DAY)
            assert await manager.validate(secret) is not None

        record = only_record(token_store)
        assert record.expires_at == T0 + 30 * DAY
        assert record.last_used_at == T0 + 29 * DAY

    async def test_expiry_never_exceeds_cap_over_many_validations(
        self, manager, token_store, clock, user_id
    ):
        secret = await manager.issue(user_id, remember_me=True)

        hours = 0
        while True:
            hours += 13
            clock.set(T0 + timedelta(hours=hours))
            if await manager.validate(secret) is None:
                break
            record = only_record(token_store)
            assert record.expires_at <= record.absolute_expires_at

        assert clock.now() > T0 + 30 * DAY
        assert token_store.records == {}

    async def test_absolute_expiry_rejects_and_deletes(self, manager, token_store, clock, user_id):
        secret = await manager.issue(user_id, remember_me=True)
        for day in (6, 12, 18, 24, 29):
            clock.set(T0 + day * DAY)
            await manager.validate(secret)

        clock.set(T0 + 30 * DAY + timedelta(seconds=1))

        assert await manager.validate(secret) is None
        assert token_store.records == {}

    async def test_absolute_cap_checked_before_inactivity(
        self, manager, token_store, clock, logger, user_id
    ):
        """When both expiries lapsed, the token is rejected for the cap."""
        secret = await manager.issue(user_id, remember_me=True)
        record = only_record(token_store)
        token_store.records[record.id] = replace(
            record, expires_at=T0 + DAY, absolute_expires_at=T0 + DAY
        )

        clock.set(T0 + DAY + timedelta(microseconds=1))

        assert await manager.validate(secret) is None
        assert token_store.records == {}
        assert logger.find("refresh_token_expired")["reason"] == "absolute"

    async def test_inactivity_expiry_rejects_and_deletes(
        self, manager, token_store, clock, logger, user_id
    ):
        secret = await manager.issue(user_id, remember_me=False)

        clock.set(T0 + DAY + timedelta(seconds=1))

        assert await manager.validate(secret) is None
        assert token_store.records == {}
        assert logger.find("refresh_token_expired")["reason"] == "inactivity"

    async def test_exact_expiry_instant_is_still_valid(self, manager, clock, user_id):
        secret = await manager.issue(user_id, remember_me=False)

        clock.set(T0 + DAY)

        assert await manager.validate(secret) is not None

    async def test_returns_none_when_row_vanishes_before_update(
        self, manager, token_store, user_id, logger
    ):
        secret = await manager.issue(user_id)

        async def vanished(record):
            return False

        token_store.update = vanished

        assert await manager.validate(secret) is None
        assert "refresh_token_vanished_during_validation" in logger.messages("warning")


@pytest.mark.unit
class TestRotate:
    """Tests for rotate()."""

    async def test_rotation_replaces_row(self, manager, token_store, codec, user_id):
        secret = await manager.issue(user_id)
        validated = await manager.validate(secret)

        result = await manager.rotate(validated.token_id)

        assert isinstance(result, Success)
        new_record = only_record(token_store)
        assert new_record.id != validated.token_id
        assert new_record.user_id == user_id
        assert new_record.token_hash == codec.hash_secret(result.value)

    async def test_old_secret_is_dead_after_rotation(self, manager, user_id):
        secret = await manager.issue(user_id)
        validated = await manager.validate(secret)

        await manager.rotate(validated.token_id)

        assert await manager.validate(secret) is None

    async def test_second_rotation_of_same_id_fails(self, manager, user_id):
        secret = await manager.issue(user_id)
        validated = await manager.validate(secret)

        first = await manager.rotate(validated.token_id)
        second = await manager.rotate(validated.token_id)

        assert isinstance(first, Success)
        assert second == Failure(error=RefreshTokenError.TOKEN_NOT_FOUND)

    async def test_unknown_id_fails_with_not_found(self, manager, logger):
        result = await manager.rotate(uuid7())

        assert result == Failure(error=RefreshTokenError.TOKEN_NOT_FOUND)
        assert "refresh_token_rotation_conflict" in logger.messages("warning")

    async def test_concurrent_rotation_has_exactly_one_winner(
        self, codec, clock, logger, user_id
    ):
        store = InMemoryRefreshTokenStore(yield_on_lookup=True)
        manager = RefreshTokenLifecycleManager(store, codec, clock, logger)
        secret = await manager.issue(user_id)
        validated = await manager.validate(secret)

        results = await asyncio.gather(
            manager.rotate(validated.token_id),
            manager.rotate(validated.token_id),
        )

        winners = [r for r in results if isinstance(r, Success)]
        losers = [r for r in results if isinstance(r, Failure)]
        assert len(winners) == 1
        assert losers == [Failure(error=RefreshTokenError.TOKEN_NOT_FOUND)]
        assert len(store.for_user(user_id)) == 1

    async def test_rotation_computes_fresh_expiry(self, manager, token_store, clock, user_id):
        """Expiry is issued anew from now, never copied from the old row."""
        secret = await manager.issue(user_id, remember_me=True)
        clock.set(T0 + 3 * DAY)
        validated = await manager.validate(secret)

        await manager.rotate(validated.token_id, TokenMetadata(remember_me=True))

        record = only_record(token_store)
        assert record.created_at == T0 + 3 * DAY
        assert record.expires_at == T0 + 10 * DAY
        assert record.absolute_expires_at == T0 + 33 * DAY

    async def test_rotation_without_remember_me_is_short_session(
        self, manager, token_store, clock, user_id
    ):
        secret = await manager.issue(user_id, remember_me=True)
        clock.set(T0 + 2 * DAY)
        validated = await manager.validate(secret)

        await manager.rotate(validated.token_id)

        assert only_record(token_store).expires_at == T0 + 3 * DAY


@pytest.mark.unit
class TestRevocation:
    """Tests for revoke_one() and revoke_all_for_user()."""

    async def test_revoke_one_deletes_token(self, manager, token_store, user_id):
        secret = await manager.issue(user_id)

        await manager.revoke_one(secret)

        assert token_store.records == {}
        assert await manager.validate(secret) is None

    async def test_revoke_one_unknown_secret_is_noop(self, manager, token_store, user_id):
        await manager.issue(user_id)

        await manager.revoke_one("never-issued")
        await manager.revoke_one("never-issued")

        assert len(token_store.records) == 1

    async def test_revoke_one_leaves_other_devices(self, manager, token_store, user_id):
        laptop = await manager.issue(user_id)
        phone = await manager.issue(user_id)

        await manager.revoke_one(laptop)

        assert await manager.validate(phone) is not None
        assert len(token_store.for_user(user_id)) == 1

    async def test_revoke_all_kills_every_token_of_user(self, manager, token_store, user_id):
        secrets = [await manager.issue(user_id) for _ in range(3)]
        other_user = uuid7()
        other_secret = await manager.issue(other_user)

        await manager.revoke_all_for_user(user_id)

        for secret in secrets:
            assert await manager.validate(secret) is None
        assert await manager.validate(other_secret) is not None

    async def test_revoke_all_is_idempotent(self, manager, logger, user_id):
        await manager.revoke_all_for_user(user_id)
        await manager.revoke_all_for_user(user_id)

        assert logger.find("refresh_tokens_revoked_for_user")["deleted"] == 0


@pytest.mark.unit
class TestPurgeExpired:
    """Tests for purge_expired()."""

    async def test_purges_only_rows_lapsed_beyond_grace(
        self, manager, token_store, clock, user_id
    ):
        await manager.issue(user_id, remember_me=False)  # lapses T0+1d
        await manager.issue(user_id, remember_me=True)  # lapses T0+7d

        clock.set(T0 + 3 * DAY)
        deleted = await manager.purge_expired(grace=timedelta(hours=24))

        assert deleted == 1
        remaining = only_record(token_store)
        assert remaining.expires_at == T0 + 7 * DAY

    async def test_keeps_rows_within_grace(self, manager, token_store, clock, user_id):
        await manager.issue(user_id, remember_me=False)

        clock.set(T0 + DAY + timedelta(hours=12))

        assert await manager.purge_expired(grace=timedelta(hours=24)) == 0
        assert len(token_store.records) == 1
