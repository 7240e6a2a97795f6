"""Loggable event database model (ownership lookups only).

Only the columns the authorization layer needs are mapped here; the event
logging schema itself belongs to the application that owns those tables.
"""

from uuid import UUID

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from lifelog_auth.infrastructure.persistence.base import BaseMutableModel


class LoggableEvent(BaseMutableModel):
    """Event a user tracks."""

    __tablename__ = "loggable_events"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
