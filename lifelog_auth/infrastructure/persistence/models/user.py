"""User database model.

Users are provisioned on first Google sign-in and looked up by the Google
subject id afterwards.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from lifelog_auth.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User account.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at / updated_at: from BaseMutableModel
        google_id: Google subject id (unique, indexed)
        email: Email reported by Google
        name: Display name reported by Google

    Relationships:
        - refresh_tokens, loggable_events, event_labels: one-to-many
          (ON DELETE CASCADE on the child side)
    """

    __tablename__ = "users"

    google_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Google subject identifier (sub claim)",
    )

    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
