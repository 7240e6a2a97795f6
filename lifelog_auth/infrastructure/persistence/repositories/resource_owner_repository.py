"""SQLAlchemyResourceOwnerRepository - ownership lookups for protected resources."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lifelog_auth.domain.enums.resource_type import ProtectedResourceType
from lifelog_auth.infrastructure.persistence.models.event_label import EventLabel
from lifelog_auth.infrastructure.persistence.models.loggable_event import (
    LoggableEvent,
)

_MODELS: dict[ProtectedResourceType, type[LoggableEvent] | type[EventLabel]] = {
    ProtectedResourceType.LOGGABLE_EVENT: LoggableEvent,
    ProtectedResourceType.EVENT_LABEL: EventLabel,
}


class SQLAlchemyResourceOwnerRepository:
    """Resolve the owning user of a loggable event or event label.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_owner_id(
        self, resource_type: ProtectedResourceType, resource_id: UUID
    ) -> UUID | None:
        """Return the owner's user id, or None if no such resource exists."""
        model = _MODELS[resource_type]
        stmt = select(model.user_id).where(model.id == resource_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
