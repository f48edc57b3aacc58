"""Redis adapter implementing CacheProtocol.

Wraps the async Redis client and maps every Redis failure to a CacheError
inside a Result. Nothing here raises.

Architecture:
- Implements CacheProtocol without inheritance (structural typing)
- Maps Redis exceptions to CacheError with InfrastructureErrorCode
- Returns Result types for all operations
- Fail-open strategy for resilience
"""

import json
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError


def _cache_error(
    infrastructure_code: InfrastructureErrorCode,
    message: str,
    key: str | None,
    error: Exception,
) -> CacheError:
    details: dict[str, Any] = {"error": str(error), "type": type(error).__name__}
    if key is not None:
        details["key"] = key
    return CacheError(
        code=ErrorCode.INTERNAL_SERVER_ERROR,
        infrastructure_code=infrastructure_code,
        message=message,
        details=details,
    )


class RedisAdapter:
    """Redis implementation of CacheProtocol.

    Note: Does NOT inherit from CacheProtocol (uses structural typing).

    Attributes:
        _redis: Async Redis client instance.
    """

    def __init__(self, redis_client: Redis) -> None:
        """Initialize Redis adapter.

        Args:
            redis_client: Async Redis client instance.
        """
        self._redis = redis_client

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Get value from Redis.

        Args:
            key: Cache key.

        Returns:
            Result with value if found, None if not found, or CacheError.
        """
        try:
            value = await self._redis.get(key)
        except RedisError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_GET_ERROR,
                    f"Failed to get key '{key}' from cache",
                    key,
                    e,
                )
            )
        if value is None:
            return Success(value=None)
        # Pool is created with decode_responses=False
        decoded = value.decode("utf-8") if isinstance(value, bytes) else value
        return Success(value=decoded)

    async def get_json(self, key: str) -> Result[Any | None, CacheError]:
        """Get JSON value from Redis.

        Args:
            key: Cache key.

        Returns:
            Result with decoded value if found, None if not found, or CacheError.
        """
        result = await self.get(key)

        match result:
            case Success(value=None):
                return Success(value=None)
            case Success(value=raw):
                try:
                    return Success(value=json.loads(raw))
                except json.JSONDecodeError as e:
                    return Failure(
                        error=_cache_error(
                            InfrastructureErrorCode.CACHE_DECODE_ERROR,
                            f"Failed to parse JSON for key '{key}'",
                            key,
                            e,
                        )
                    )
            case Failure(error=err):
                return Failure(error=err)

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Set value in Redis.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl: Time to live in seconds (None = no expiration).

        Returns:
            Result with None on success, or CacheError.
        """
        try:
            if ttl is not None:
                await self._redis.setex(key, ttl, value)
            else:
                await self._redis.set(key, value)
        except RedisError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_SET_ERROR,
                    f"Failed to set key '{key}' in cache",
                    key,
                    e,
                )
            )
        return Success(value=None)

    async def set_json(
        self,
        key: str,
        value: Any,
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Set JSON value in Redis.

        Args:
            key: Cache key.
            value: JSON-serializable value.
            ttl: Time to live in seconds (None = no expiration).

        Returns:
            Result with None on success, or CacheError.
        """
        try:
            serialized = json.dumps(value)
        except (TypeError, ValueError) as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_SET_ERROR,
                    f"Failed to serialize value for key '{key}'",
                    key,
                    e,
                )
            )
        return await self.set(key, serialized, ttl)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        """Delete key from Redis.

        Returns:
            Result with True if deleted, False if key didn't exist, or CacheError.
        """
        try:
            deleted_count = await self._redis.delete(key)
        except RedisError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_DELETE_ERROR,
                    f"Failed to delete key '{key}' from cache",
                    key,
                    e,
                )
            )
        return Success(value=deleted_count > 0)

    async def exists(self, key: str) -> Result[bool, CacheError]:
        """Check if key exists in Redis."""
        try:
            exists_count = await self._redis.exists(key)
        except RedisError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_GET_ERROR,
                    f"Failed to check existence of key '{key}'",
                    key,
                    e,
                )
            )
        return Success(value=exists_count > 0)

    async def ttl(self, key: str) -> Result[int | None, CacheError]:
        """Get time to live for key in Redis.

        Returns:
            Result with seconds until expiration, None if no TTL or key
            doesn't exist, or CacheError.
        """
        try:
            ttl_value = await self._redis.ttl(key)
        except RedisError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_GET_ERROR,
                    f"Failed to get TTL for key '{key}'",
                    key,
                    e,
                )
            )
        # Redis returns -2 if key doesn't exist, -1 if no expiration
        if ttl_value in (-2, -1):
            return Success(value=None)
        return Success(value=ttl_value)

    async def ping(self) -> Result[bool, CacheError]:
        """Check Redis connectivity (health check).

        Returns:
            Result with True if Redis is reachable, or CacheError.
        """
        try:
            await self._redis.ping()  # type: ignore[misc]
        except RedisError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                    "Redis health check failed",
                    None,
                    e,
                )
            )
        return Success(value=True)
