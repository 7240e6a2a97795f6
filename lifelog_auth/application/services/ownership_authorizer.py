"""Ownership authorization service.

Stateless per-request check that the authenticated user owns the resource a
handler is about to read or mutate. Request handlers call it explicitly:

    result = await authorizer.authorize(
        user, ProtectedResourceType.LOGGABLE_EVENT, event_id
    )
    if isinstance(result, Failure):
        ...  # map result.error.code to 401 / 404 / 403

Checks run in order: authenticated, resource exists, resource owned.
"""

from uuid import UUID

from lifelog_auth.core.result import Failure, Result, Success
from lifelog_auth.domain.entities.user import User
from lifelog_auth.domain.enums import ProtectedResourceType
from lifelog_auth.domain.errors import OwnershipError, OwnershipErrorCode
from lifelog_auth.domain.protocols import ResourceOwnerRepository


class OwnershipAuthorizer:
    """Verify that a user owns a protected resource.

    Example:
        >>> authorizer = OwnershipAuthorizer(resource_owner_repo)
        >>> result = await authorizer.authorize(user, ProtectedResourceType.EVENT_LABEL, label_id)
        >>> isinstance(result, Success)
        True
    """

    def __init__(self, resource_owner_repo: ResourceOwnerRepository) -> None:
        """Initialize with the owner lookup port.

        Args:
            resource_owner_repo: Resolves the owner id of a resource.
        """
        self._resource_owner_repo = resource_owner_repo

    async def authorize(
        self,
        user: User | None,
        resource_type: ProtectedResourceType,
        resource_id: UUID,
    ) -> Result[None, OwnershipError]:
        """Authorize access to a resource by owner id.

        Args:
            user: Authenticated user, or None when the request has no session.
            resource_type: Kind of resource being accessed.
            resource_id: Resource identifier.

        Returns:
            Success(None) if ``user`` owns the resource.
            Failure(OwnershipError) with NOT_AUTHENTICATED, RESOURCE_NOT_FOUND
            or FORBIDDEN otherwise.
        """
        if user is None:
            return Failure(
                error=OwnershipError(
                    code=OwnershipErrorCode.NOT_AUTHENTICATED,
                    message="Not authenticated",
                )
            )

        owner_id = await self._resource_owner_repo.find_owner_id(
            resource_type, resource_id
        )

        if owner_id is None:
            return Failure(
                error=OwnershipError(
                    code=OwnershipErrorCode.RESOURCE_NOT_FOUND,
                    message=f"{resource_type.value} not found",
                )
            )

        if owner_id != user.id:
            return Failure(
                error=OwnershipError(
                    code=OwnershipErrorCode.FORBIDDEN,
                    message=f"You do not have permission to access this {resource_type.value}",
                )
            )

        return Success(value=None)
