"""Redis implementation of RolePermissionCacheProtocol.

Stores the fully expanded permission set of a role so authorization checks
for custom roles skip the store.

Key Patterns:
    - {prefix}:role:{role_id}:permissions -> JSON list of permission values

Architecture:
    - Implements RolePermissionCacheProtocol (structural typing)
    - Uses CacheProtocol for low-level Redis operations
    - Returns Result types; callers decide whether to fail open
    - The store is always the source of truth
"""

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums import Permission
from src.domain.protocols.cache_protocol import CacheProtocol
from src.infrastructure.cache.cache_keys import CacheKeys
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError


class RedisRolePermissionCache:
    """Role permission cache backed by Redis.

    Note: Does NOT inherit from RolePermissionCacheProtocol (uses structural typing).

    Attributes:
        _cache: Cache instance implementing CacheProtocol.
        _keys: Cache key builder.
    """

    def __init__(self, cache: CacheProtocol, keys: CacheKeys) -> None:
        """Initialize role permission cache.

        Args:
            cache: Cache instance implementing CacheProtocol.
            keys: Cache key builder.
        """
        self._cache = cache
        self._keys = keys

    async def set_permissions(
        self,
        role_id: str,
        permissions: frozenset[Permission],
        ttl_seconds: int,
    ) -> Result[None, DomainError]:
        """Write the permission set of a role with a TTL.

        Values are sorted so identical sets always serialize identically.
        """
        payload = sorted(permission.value for permission in permissions)
        return await self._cache.set_json(
            self._keys.role_permissions(role_id),
            payload,
            ttl=ttl_seconds,
        )

    async def get_permissions(
        self,
        role_id: str,
    ) -> Result[frozenset[Permission] | None, DomainError]:
        """Read the permission set of a role.

        Returns:
            Success(permissions) on hit, Success(None) on miss,
            Failure(CacheError) on cache failure or undecodable entry.
        """
        key = self._keys.role_permissions(role_id)
        result = await self._cache.get_json(key)

        match result:
            case Success(value=None):
                return Success(value=None)
            case Success(value=list() as raw):
                try:
                    return Success(value=frozenset(Permission(item) for item in raw))
                except ValueError as e:
                    return Failure(error=self._decode_error(key, str(e)))
            case Success(value=other):
                return Failure(
                    error=self._decode_error(key, f"unexpected {type(other).__name__}")
                )
            case Failure(error=err):
                return Failure(error=err)

    async def delete_permissions(self, role_id: str) -> Result[bool, DomainError]:
        """Remove the cached permission set of a role."""
        return await self._cache.delete(self._keys.role_permissions(role_id))

    def _decode_error(self, key: str, reason: str) -> CacheError:
        return CacheError(
            code=ErrorCode.INTERNAL_SERVER_ERROR,
            infrastructure_code=InfrastructureErrorCode.CACHE_DECODE_ERROR,
            message=f"Invalid permission set cached under '{key}'",
            details={"key": key, "error": reason},
        )
