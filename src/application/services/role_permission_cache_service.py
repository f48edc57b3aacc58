"""Role permission cache service.

Keeps the external permission cache warm for custom roles and serves the
authorization read path.

Policy:
    - Predefined roles are never cached; their permissions are local.
    - Entries live for the authentication-token lifetime, so a cached set
      never outlives the tokens issued against it.
    - Cache failures never fail an authorization check. The read path
      falls back to the store; the write path reports the failure as a
      Result (populate_if_required) or as a bool plus an error log
      (get_or_populate, populate_by_user_role, invalidate).

Usage:
    service = RolePermissionCacheService(
        role_registry=registry,
        permission_cache=cache,
        ttl_seconds=settings.jwt_token_time_in_secs,
        logger=logger,
    )
    await service.populate_by_user_role(user_role)
"""

from src.application.services.role_registry import RoleRegistry
from src.core.result import Failure, Result, Success
from src.domain.entities.user_role import UserRole
from src.domain.enums import Permission
from src.domain.errors import UserRoleError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.role_permission_cache_protocol import (
    RolePermissionCacheProtocol,
)
from src.domain.roles import get_predefined_role, is_predefined_role


class RolePermissionCacheService:
    """Populates and reads the role -> permissions cache."""

    def __init__(
        self,
        role_registry: RoleRegistry,
        permission_cache: RolePermissionCacheProtocol,
        ttl_seconds: int,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            role_registry: Resolves custom roles from the store.
            permission_cache: Role permission cache port.
            ttl_seconds: Entry lifetime (token lifetime).
            logger: Structured logger.
        """
        self._role_registry = role_registry
        self._permission_cache = permission_cache
        self._ttl_seconds = ttl_seconds
        self._logger = logger

    async def populate_if_required(
        self,
        role_id: str,
        merchant_id: str,
        org_id: str,
    ) -> Result[None, UserRoleError]:
        """Cache the permission set of a custom role.

        Predefined roles succeed immediately without any store or cache
        call.

        Args:
            role_id: Role identifier.
            merchant_id: Merchant scope used to resolve the role.
            org_id: Organization scope used to resolve the role.

        Returns:
            Success(None), or Failure(UserRoleError) with the underlying
            store or cache error attached as cause.
        """
        if is_predefined_role(role_id):
            return Success(value=None)

        match await self._role_registry.resolve(role_id, merchant_id, org_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=role_info):
                permissions = role_info.get_permissions_set()

        match await self._permission_cache.set_permissions(
            role_id, permissions, self._ttl_seconds
        ):
            case Failure(error=error):
                return Failure(
                    error=UserRoleError.internal_server_error(
                        "Failed to cache role permissions",
                        cause=error,
                    )
                )

        self._logger.debug(
            "role_permissions_cached",
            role_id=role_id,
            permission_count=len(permissions),
            ttl_seconds=self._ttl_seconds,
        )
        return Success(value=None)

    async def get_or_populate(
        self,
        role_id: str,
        merchant_id: str,
        org_id: str,
    ) -> bool:
        """Populate the cache for a role and report success as a bool.

        Failures are logged with their cause and never propagated.
        """
        match await self.populate_if_required(role_id, merchant_id, org_id):
            case Success():
                return True
            case Failure(error=error):
                self._logger.error(
                    "role_permission_cache_population_failed",
                    role_id=role_id,
                    merchant_id=merchant_id,
                    org_id=org_id,
                    error_code=error.code.value,
                    error_message=error.message,
                    cause=str(error.cause) if error.cause else None,
                )
                return False

    async def populate_by_user_role(self, user_role: UserRole) -> bool:
        """Populate the cache for the role of an assignment.

        Returns False without any store or cache call when the assignment
        carries no merchant_id or org_id.
        """
        if user_role.merchant_id is None or user_role.org_id is None:
            return False

        return await self.get_or_populate(
            user_role.role_id,
            user_role.merchant_id,
            user_role.org_id,
        )

    async def get_permissions(
        self,
        role_id: str,
        merchant_id: str,
        org_id: str,
    ) -> Result[frozenset[Permission], UserRoleError]:
        """Return the permission set of a role.

        Read path: predefined table, then cache, then store. A cache miss
        or cache failure resolves the role from the store and repopulates
        the cache on a best-effort basis.
        """
        predefined = get_predefined_role(role_id)
        if predefined is not None:
            return Success(value=predefined.get_permissions_set())

        match await self._permission_cache.get_permissions(role_id):
            case Success(value=None):
                self._logger.debug("role_permission_cache_miss", role_id=role_id)
            case Success(value=permissions):
                return Success(value=permissions)
            case Failure(error=error):
                self._logger.warning(
                    "role_permission_cache_unavailable",
                    role_id=role_id,
                    cause=str(error),
                )

        match await self._role_registry.resolve(role_id, merchant_id, org_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=role_info):
                permissions = role_info.get_permissions_set()

        match await self._permission_cache.set_permissions(
            role_id, permissions, self._ttl_seconds
        ):
            case Failure(error=error):
                self._logger.warning(
                    "role_permission_cache_repopulation_failed",
                    role_id=role_id,
                    cause=str(error),
                )

        return Success(value=permissions)

    async def check_permission(
        self,
        role_id: str,
        merchant_id: str,
        org_id: str,
        required: Permission,
    ) -> Result[bool, UserRoleError]:
        """Check whether a role grants a permission."""
        match await self.get_permissions(role_id, merchant_id, org_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=permissions):
                return Success(value=required in permissions)

    async def invalidate(self, role_id: str) -> bool:
        """Drop the cached permission set of a role.

        Returns True when the cache call succeeded, whether or not an entry
        existed.
        """
        match await self._permission_cache.delete_permissions(role_id):
            case Success():
                return True
            case Failure(error=error):
                self._logger.error(
                    "role_permission_cache_invalidation_failed",
                    role_id=role_id,
                    cause=str(error),
                )
                return False
