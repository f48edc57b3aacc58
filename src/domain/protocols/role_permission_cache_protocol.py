"""RolePermissionCache protocol (port).

Role-level permission cache: role_id -> set of Permission with a TTL.
Infrastructure provides RedisRolePermissionCache.

Entries are written on first resolution of a custom role, overwritten on
role update and expire after the token lifetime. An absent entry means
"resolve from the store".
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.enums import Permission


class RolePermissionCacheProtocol(Protocol):
    """Port for caching resolved role permissions."""

    async def set_permissions(
        self,
        role_id: str,
        permissions: frozenset[Permission],
        ttl_seconds: int,
    ) -> Result[None, DomainError]:
        """Store the permission set of a role.

        Args:
            role_id: Role identifier.
            permissions: Fully expanded permission set.
            ttl_seconds: Entry lifetime in seconds.

        Returns:
            Success(None) or Failure(CacheError).
        """
        ...

    async def get_permissions(
        self,
        role_id: str,
    ) -> Result[frozenset[Permission] | None, DomainError]:
        """Read the cached permission set of a role.

        Returns:
            Success(permissions) on hit, Success(None) on miss,
            Failure(CacheError) if the cache is unavailable.
        """
        ...

    async def delete_permissions(self, role_id: str) -> Result[bool, DomainError]:
        """Remove the cached permission set of a role.

        Returns:
            Success(True) if an entry was removed, Success(False) if none
            existed, Failure(CacheError) on cache failure.
        """
        ...
