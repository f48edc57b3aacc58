"""RoleRepository protocol for custom role persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.

All methods return Result types; storage failures surface as
Failure(DatabaseError) and are never raised.
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities.role import Role


class RoleRepository(Protocol):
    """Custom role repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        list_all_roles: Every custom role visible in a merchant scope
        find_by_role_name: Indexed exact-name lookup in a merchant scope
        find_by_role_id_in_merchant_scope: Resolve a role for a merchant
        find_by_role_id_in_org_scope: Resolve a role anywhere in an org
        insert_role: Persist a new role
        update_role: Persist changes to an existing role
    """

    async def list_all_roles(
        self,
        merchant_id: str,
        org_id: str,
    ) -> Result[list[Role], DomainError]:
        """List custom roles visible to a merchant.

        Visible roles are those created by the merchant plus
        organization-scoped roles of its organization.

        Args:
            merchant_id: Merchant identifier.
            org_id: Organization identifier.

        Returns:
            Success(list of roles) or Failure(DatabaseError).
        """
        ...

    async def find_by_role_name(
        self,
        role_name: str,
        merchant_id: str,
        org_id: str,
    ) -> Result[Role | None, DomainError]:
        """Find a custom role by exact (case-sensitive) name in a merchant scope.

        Uses the same visibility rule as list_all_roles.

        Args:
            role_name: Exact role name.
            merchant_id: Merchant identifier.
            org_id: Organization identifier.

        Returns:
            Success(Role) if found, Success(None) if not,
            or Failure(DatabaseError).
        """
        ...

    async def find_by_role_id_in_merchant_scope(
        self,
        role_id: str,
        merchant_id: str,
        org_id: str,
    ) -> Result[Role | None, DomainError]:
        """Find a custom role visible to a merchant.

        Args:
            role_id: Role identifier.
            merchant_id: Merchant identifier.
            org_id: Organization identifier.

        Returns:
            Success(Role) if found, Success(None) if not,
            or Failure(DatabaseError).
        """
        ...

    async def find_by_role_id_in_org_scope(
        self,
        role_id: str,
        org_id: str,
    ) -> Result[Role | None, DomainError]:
        """Find a custom role anywhere within an organization.

        Args:
            role_id: Role identifier.
            org_id: Organization identifier.

        Returns:
            Success(Role) if found, Success(None) if not,
            or Failure(DatabaseError).
        """
        ...

    async def insert_role(self, role: Role) -> Result[Role, DomainError]:
        """Persist a new custom role.

        Returns:
            Success(inserted role) or Failure(DatabaseError), including
            unique constraint violations.
        """
        ...

    async def update_role(self, role: Role) -> Result[Role, DomainError]:
        """Persist name/group changes of an existing custom role.

        Returns:
            Success(updated role) or Failure(DatabaseError).
        """
        ...
