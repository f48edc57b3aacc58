"""Cache protocol for domain layer.

Defines the key-value cache interface the subsystem needs, without knowing
about any specific implementation. Infrastructure adapters implement this
protocol (RedisAdapter).

Architecture:
- Protocol-based - uses structural typing
- All operations return Result types
- Fail-open strategy: cache failures must not break authorization
"""

from typing import Any, Protocol

from src.core.errors import DomainError
from src.core.result import Result


class CacheProtocol(Protocol):
    """Cache protocol - what the subsystem needs from a key-value cache."""

    async def get(self, key: str) -> Result[str | None, DomainError]:
        """Get value from cache.

        Args:
            key: Cache key.

        Returns:
            Result with value if found, None if not found, or CacheError.
        """
        ...

    async def get_json(self, key: str) -> Result[Any | None, DomainError]:
        """Get a JSON-decoded value from cache.

        Args:
            key: Cache key.

        Returns:
            Result with decoded value if found, None if not found, or CacheError.
        """
        ...

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, DomainError]:
        """Set value in cache.

        Args:
            key: Cache key.
            value: Value to cache (string).
            ttl: Time to live in seconds (None = no expiration).

        Returns:
            Result with None on success, or CacheError.

        Example:
            result = await cache.set(key, payload, ttl=settings.jwt_token_time_in_secs)
            match result:
                case Failure(_):
                    # Fail open - continue without cache
                    pass
        """
        ...

    async def set_json(
        self,
        key: str,
        value: Any,
        ttl: int | None = None,
    ) -> Result[None, DomainError]:
        """Serialize value to JSON and set it in cache.

        Args:
            key: Cache key.
            value: JSON-serializable value.
            ttl: Time to live in seconds (None = no expiration).

        Returns:
            Result with None on success, or CacheError.
        """
        ...

    async def delete(self, key: str) -> Result[bool, DomainError]:
        """Delete key from cache.

        Returns:
            Result with True if key was deleted, False if it didn't exist,
            or CacheError.
        """
        ...

    async def exists(self, key: str) -> Result[bool, DomainError]:
        """Check if key exists in cache."""
        ...

    async def ttl(self, key: str) -> Result[int | None, DomainError]:
        """Get remaining time to live for key.

        Returns:
            Result with seconds until expiration, None if no TTL or key
            doesn't exist, or CacheError.
        """
        ...

    async def ping(self) -> Result[bool, DomainError]:
        """Check cache connectivity (health check)."""
        ...
