"""Base model and mixins for all database tables.

- BaseModel: Base class for ALL models (id, created_at)
- TimestampMixin: adds updated_at
- BaseMutableModel: BaseModel + TimestampMixin
- ensure_utc: normalizes datetimes read back from the database

Following hexagonal architecture, domain entities do NOT inherit from these
classes; repositories map rows to domain entities.

The generic ``Uuid`` type keeps the schema portable between PostgreSQL
(production) and SQLite (tests).
"""

from datetime import UTC, datetime
from uuid import UUID as PythonUUID, uuid4

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
    - id: UUID primary key (auto-generated when not supplied)
    - created_at: Timestamp when record was created (UTC)
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Mixin for mutable models that track updates."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models.

    Provides id, created_at and updated_at with the mixin order handled here.
    """

    __abstract__ = True


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from the database.

    PostgreSQL returns aware values for TIMESTAMPTZ columns; SQLite stores
    naive ones. Values are always written in UTC, so tagging is lossless.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
