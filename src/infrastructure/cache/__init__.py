"""Cache infrastructure package.

Architecture:
- RedisAdapter: Concrete Redis implementation of CacheProtocol
- RedisRolePermissionCache: role_id -> permission set cache
- CacheKeys: Key layout shared by readers and writers
- Use src.core.container.get_cache() for dependency injection
"""

from src.infrastructure.cache.cache_keys import CacheKeys
from src.infrastructure.cache.redis_adapter import RedisAdapter
from src.infrastructure.cache.role_permission_cache import RedisRolePermissionCache

__all__ = [
    "CacheKeys",
    "RedisAdapter",
    "RedisRolePermissionCache",
]
