"""User domain entity.

Local account resolved from a Google identity. Pure data, no framework
dependencies.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class User:
    """Local user record.

    Attributes:
        id: Local unique identifier.
        google_id: Google subject id (``sub`` claim), unique.
        email: Email address reported by Google.
        name: Display name reported by Google.
        created_at: Timestamp when the user was first provisioned.
        updated_at: Timestamp of the last profile change.
    """

    id: UUID
    google_id: str
    email: str
    name: str
    created_at: datetime
    updated_at: datetime
