"""Role registry service.

Resolves a role_id to a RoleInfo. Predefined roles are answered from the
compiled-in table without touching the store; custom roles are read
through the RoleRepository port.

Resolution order:
    1. PREDEFINED_ROLES (O(1), no I/O)
    2. RoleRepository (merchant scope or organization scope)

Usage:
    registry = RoleRegistry(role_repo=role_repo)
    result = await registry.resolve(role_id, merchant_id, org_id)
"""

from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.role import Role
from src.domain.errors import UserRoleError
from src.domain.protocols.role_repository import RoleRepository
from src.domain.roles import PREDEFINED_ROLES, get_predefined_role
from src.domain.value_objects import RoleInfo


class RoleRegistry:
    """Resolves role identifiers to RoleInfo."""

    def __init__(self, role_repo: RoleRepository) -> None:
        """Initialize registry with the role store.

        Args:
            role_repo: Custom role repository.
        """
        self._role_repo = role_repo

    async def resolve(
        self,
        role_id: str,
        merchant_id: str,
        org_id: str,
    ) -> Result[RoleInfo, UserRoleError]:
        """Resolve a role visible to a merchant.

        Args:
            role_id: Role identifier.
            merchant_id: Merchant the caller acts for.
            org_id: Organization of that merchant.

        Returns:
            Success(RoleInfo), Failure(ROLE_NOT_FOUND) if neither source
            knows the role, Failure(INTERNAL_SERVER_ERROR) on store failure.
        """
        predefined = get_predefined_role(role_id)
        if predefined is not None:
            return Success(value=predefined)

        return self._to_role_info(
            role_id,
            await self._role_repo.find_by_role_id_in_merchant_scope(
                role_id, merchant_id, org_id
            ),
        )

    async def resolve_in_org_scope(
        self,
        role_id: str,
        org_id: str,
    ) -> Result[RoleInfo, UserRoleError]:
        """Resolve a role anywhere within an organization.

        Same as resolve(), but custom roles of any merchant of the
        organization qualify.
        """
        predefined = get_predefined_role(role_id)
        if predefined is not None:
            return Success(value=predefined)

        return self._to_role_info(
            role_id,
            await self._role_repo.find_by_role_id_in_org_scope(role_id, org_id),
        )

    async def list_roles(
        self,
        merchant_id: str,
        org_id: str,
    ) -> Result[list[RoleInfo], UserRoleError]:
        """List roles assignable within a merchant scope.

        Internal predefined roles are excluded. Predefined roles come
        first, in table order, followed by custom roles in store order.
        """
        roles = [
            role_info
            for role_info in PREDEFINED_ROLES.values()
            if not role_info.is_internal
        ]

        match await self._role_repo.list_all_roles(merchant_id, org_id):
            case Failure(error=error):
                return Failure(
                    error=UserRoleError.internal_server_error(
                        "Failed to list custom roles",
                        cause=error,
                    )
                )
            case Success(value=custom_roles):
                roles.extend(RoleInfo.from_role(role) for role in custom_roles)

        return Success(value=roles)

    @staticmethod
    def _to_role_info(
        role_id: str,
        result: Result[Role | None, DomainError],
    ) -> Result[RoleInfo, UserRoleError]:
        match result:
            case Failure(error=error):
                return Failure(
                    error=UserRoleError.internal_server_error(
                        "Failed to fetch role from store",
                        cause=error,
                    )
                )
            case Success(value=None):
                return Failure(error=UserRoleError.role_not_found(role_id))
            case Success(value=role):
                return Success(value=RoleInfo.from_role(role))
