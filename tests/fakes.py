"""In-memory test doubles for domain ports.

Structural implementations of RefreshTokenStore, UserRepository, Clock and
LoggerProtocol. Kept out of the package: production code never uses them.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

from uuid_extensions import uuid7

from lifelog_auth.domain.entities import RefreshTokenRecord, User

T0 = datetime(2026, 1, 5, 9, 0, tzinfo=UTC)
TEST_SIGNING_KEY = "test-signing-key-0123456789abcdef-xyz"


class MutableClock:
    """Clock whose current time is set by the test."""

    def __init__(self, now: datetime) -> None:
        self.current = now

    def now(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta

    def set(self, now: datetime) -> None:
        self.current = now


class InMemoryRefreshTokenStore:
    """Dict-backed RefreshTokenStore.

    Args:
        yield_on_lookup: Yield to the event loop inside ``find_by_id`` so
            concurrent rotations interleave between lookup and delete.
    """

    def __init__(self, *, yield_on_lookup: bool = False) -> None:
        self.records: dict[UUID, RefreshTokenRecord] = {}
        self._yield_on_lookup = yield_on_lookup

    async def create(self, record: RefreshTokenRecord) -> RefreshTokenRecord:
        self.records[record.id] = record
        return record

    async def find_by_hash(self, token_hash: str) -> RefreshTokenRecord | None:
        for record in self.records.values():
            if record.token_hash == token_hash:
                return record
        return None

    async def find_by_id(self, token_id: UUID) -> RefreshTokenRecord | None:
        record = self.records.get(token_id)
        if self._yield_on_lookup:
            await asyncio.sleep(0)
        return record

    async def update(self, record: RefreshTokenRecord) -> bool:
        if record.id not in self.records:
            return False
        self.records[record.id] = record
        return True

    async def delete(self, token_id: UUID) -> bool:
        return self.records.pop(token_id, None) is not None

    async def delete_by_hash(self, token_hash: str) -> int:
        ids = [r.id for r in self.records.values() if r.token_hash == token_hash]
        for token_id in ids:
            del self.records[token_id]
        return len(ids)

    async def delete_all_for_user(self, user_id: UUID) -> int:
        ids = [r.id for r in self.records.values() if r.user_id == user_id]
        for token_id in ids:
            del self.records[token_id]
        return len(ids)

    async def delete_expired(self, before: datetime) -> int:
        ids = [r.id for r in self.records.values() if r.expires_at < before]
        for token_id in ids:
            del self.records[token_id]
        return len(ids)

    def for_user(self, user_id: UUID) -> list[RefreshTokenRecord]:
        return [r for r in self.records.values() if r.user_id == user_id]


class InMemoryUserRepository:
    """Dict-backed UserRepository."""

    def __init__(self, clock: MutableClock) -> None:
        self.users: dict[UUID, User] = {}
        self._clock = clock

    async def find_by_id(self, user_id: UUID) -> User | None:
        return self.users.get(user_id)

    async def find_by_external_id(self, google_id: str) -> User | None:
        for user in self.users.values():
            if user.google_id == google_id:
                return user
        return None

    async def create(self, *, google_id: str, email: str, name: str) -> User:
        now = self._clock.now()
        user = User(
            id=uuid7(),
            google_id=google_id,
            email=email,
            name=name,
            created_at=now,
            updated_at=now,
        )
        self.users[user.id] = user
        return user


@dataclass
class RecordingLogger:
    """LoggerProtocol implementation that keeps every call."""

    entries: list[tuple[str, str, dict[str, Any]]] = field(default_factory=list)
    context: dict[str, Any] = field(default_factory=dict)

    def _record(self, level: str, message: str, context: dict[str, Any]) -> None:
        self.entries.append((level, message, {**self.context, **context}))

    def debug(self, message: str, /, **context: Any) -> None:
        self._record("debug", message, context)

    def info(self, message: str, /, **context: Any) -> None:
        self._record("info", message, context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._record("warning", message, context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        if error is not None:
            context["error_type"] = type(error).__name__
        self._record("error", message, context)

    def bind(self, **context: Any) -> "RecordingLogger":
        return RecordingLogger(entries=self.entries, context={**self.context, **context})

    def messages(self, level: str | None = None) -> list[str]:
        return [m for lvl, m, _ in self.entries if level is None or lvl == level]

    def find(self, message: str) -> dict[str, Any] | None:
        for _, m, context in self.entries:
            if m == message:
                return context
        return None
