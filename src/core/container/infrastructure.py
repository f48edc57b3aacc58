"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Cache (Redis)
- Role permission cache (Redis)
- Database (PostgreSQL)
- Logging (structlog console)
"""

from functools import lru_cache, partial
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import get_settings
from src.infrastructure.persistence.database import Database, register_after_commit

if TYPE_CHECKING:
    from src.domain.protocols.after_commit_protocol import AfterCommitProtocol
    from src.domain.protocols.cache_protocol import CacheProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.role_permission_cache_protocol import (
        RolePermissionCacheProtocol,
    )
    from src.infrastructure.cache.cache_keys import CacheKeys


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_cache() -> "CacheProtocol":
    """Get cache client singleton (app-scoped).

    Returns RedisAdapter with connection pooling. The pool's socket
    timeouts are the only timeouts applied to cache calls.

    Returns:
        Cache client implementing CacheProtocol.
    """
    from redis.asyncio import ConnectionPool, Redis

    from src.infrastructure.cache.redis_adapter import RedisAdapter

    pool = ConnectionPool.from_url(
        get_settings().redis_url,
        max_connections=50,
        decode_responses=False,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
    )
    redis_client = Redis(connection_pool=pool)
    return RedisAdapter(redis_client=redis_client)


@lru_cache()
def get_cache_keys() -> "CacheKeys":
    """Get cache key builder singleton (app-scoped)."""
    from src.infrastructure.cache.cache_keys import CacheKeys

    return CacheKeys(prefix=get_settings().cache_key_prefix)


@lru_cache()
def get_role_permission_cache() -> "RolePermissionCacheProtocol":
    """Get role permission cache singleton (app-scoped).

    Returns:
        RedisRolePermissionCache over the shared cache client.
    """
    from src.infrastructure.cache.role_permission_cache import (
        RedisRolePermissionCache,
    )

    return RedisRolePermissionCache(cache=get_cache(), keys=get_cache_keys())


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for unit-of-work sessions.

    Returns:
        Database manager instance.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.is_testing
    return ConsoleAdapter(use_json=use_json, log_level=settings.log_level)


# ============================================================================
# Unit-of-Work Dependencies
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (unit-of-work scoped).

    Commits on success and rolls back on exception. Work scheduled through
    get_after_commit(session) runs after the commit.

    Yields:
        Database session for the unit of work.

    Usage:
        async for session in get_db_session():
            handler = get_create_role_handler(session)
            result = await handler.handle(command)
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


def get_after_commit(session: AsyncSession) -> "AfterCommitProtocol":
    """Get the after-commit scheduler bound to a session.

    Args:
        session: Unit-of-work session from get_db_session().

    Returns:
        AfterCommitProtocol: Callable that defers work until commit.
    """
    return partial(register_after_commit, session)
