"""Cache key construction utilities.

Centralized cache key construction so every writer and reader agrees on
the layout. All keys follow the pattern: {prefix}:{domain}:{resource}:{id}

Usage:
    from src.core.config import get_settings
    from src.infrastructure.cache.cache_keys import CacheKeys

    keys = CacheKeys(prefix=get_settings().cache_key_prefix)
    key = keys.role_permissions(role_id)
"""

from dataclasses import dataclass


@dataclass
class CacheKeys:
    """Centralized cache key construction utilities.

    Attributes:
        prefix: Cache key prefix (typically "authz").

    Example:
        keys = CacheKeys(prefix="authz")
        key = keys.role_permissions("role_01j...")  # "authz:role:role_01j...:permissions"
    """

    prefix: str

    def role_permissions(self, role_id: str) -> str:
        """Role permission set cache key.

        Pattern: {prefix}:role:{role_id}:permissions

        Args:
            role_id: Role identifier.

        Returns:
            Cache key string.
        """
        return f"{self.prefix}:role:{role_id}:permissions"
