"""UserRoleRepository protocol for user-role assignments.

Port (interface) for hexagonal architecture. Assignments exist once per
schema version (UserRoleVersion); every method takes the version it
operates on.
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities.user_role import UserRole, UserRoleUpdate
from src.domain.enums import UserRoleVersion


class UserRoleRepository(Protocol):
    """User-role assignment repository protocol (port)."""

    async def find_by_user_id_and_lineage(
        self,
        user_id: str,
        org_id: str,
        merchant_id: str,
        profile_id: str | None,
        version: UserRoleVersion,
    ) -> Result[UserRole | None, DomainError]:
        """Find the assignment of a user within a lineage.

        Returns:
            Success(UserRole) if found, Success(None) if not,
            or Failure(DatabaseError).
        """
        ...

    async def update_user_role_by_user_id_and_lineage(
        self,
        user_id: str,
        org_id: str,
        merchant_id: str,
        profile_id: str | None,
        update: UserRoleUpdate,
        version: UserRoleVersion,
    ) -> Result[UserRole, DomainError]:
        """Apply an update to the assignment identified by user and lineage.

        Args:
            user_id: Assigned user.
            org_id: Organization lineage component.
            merchant_id: Merchant lineage component.
            profile_id: Profile lineage component (None matches org/merchant rows).
            update: UpdateStatus or UpdateRole.
            version: Schema version of the row to update.

        Returns:
            Success(updated UserRole) or Failure(DatabaseError); a missing
            row is a failure (USER_ROLE_NOT_FOUND).
        """
        ...
