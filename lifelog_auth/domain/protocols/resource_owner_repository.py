"""ResourceOwnerRepository protocol (port).

Looks up who owns a protected resource for ownership authorization.
"""

from typing import Protocol
from uuid import UUID

from lifelog_auth.domain.enums.resource_type import ProtectedResourceType


class ResourceOwnerRepository(Protocol):
    """Protocol for resolving resource ownership."""

    async def find_owner_id(
        self, resource_type: ProtectedResourceType, resource_id: UUID
    ) -> UUID | None:
        """Return the owning user id, or None if the resource does not exist."""
        ...
