"""Event label database model (ownership lookups only)."""

from uuid import UUID

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from lifelog_auth.infrastructure.persistence.base import BaseMutableModel


class EventLabel(BaseMutableModel):
    """Label a user attaches to events."""

    __tablename__ = "event_labels"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
