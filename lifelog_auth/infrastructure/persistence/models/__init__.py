"""Database models.

Importing this package registers every table on BaseModel.metadata
(used by create_all and Alembic autogenerate).
"""

from lifelog_auth.infrastructure.persistence.models.event_label import EventLabel
from lifelog_auth.infrastructure.persistence.models.loggable_event import LoggableEvent
from lifelog_auth.infrastructure.persistence.models.refresh_token import RefreshToken
from lifelog_auth.infrastructure.persistence.models.user import User

__all__ = ["EventLabel", "LoggableEvent", "RefreshToken", "User"]
