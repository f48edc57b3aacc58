"""Container module - Centralized dependency injection (composition root).

    from src.core.container import get_cache, get_role_permission_cache_service

The container is organized into modules:
- infrastructure: App-scoped singletons (cache, database, logging)
- repositories: Session-scoped repository factories
- services: Session-scoped service and command handler factories
"""

from src.core.config import get_settings

# Infrastructure services
from src.core.container.infrastructure import (
    get_after_commit,
    get_cache,
    get_cache_keys,
    get_database,
    get_db_session,
    get_logger,
    get_role_permission_cache,
)

# Repositories
from src.core.container.repositories import (
    get_merchant_account_repository,
    get_role_repository,
    get_user_role_repository,
)

# Services and handlers
from src.core.container.services import (
    get_create_role_handler,
    get_merchant_resolver,
    get_role_permission_cache_service,
    get_role_registry,
    get_role_validation_service,
    get_update_role_handler,
    get_update_user_role_handler,
    get_user_role_update_service,
)

__all__ = [
    # Settings
    "get_settings",
    # Infrastructure
    "get_after_commit",
    "get_cache",
    "get_cache_keys",
    "get_database",
    "get_db_session",
    "get_logger",
    "get_role_permission_cache",
    # Repositories
    "get_merchant_account_repository",
    "get_role_repository",
    "get_user_role_repository",
    # Services
    "get_merchant_resolver",
    "get_role_permission_cache_service",
    "get_role_registry",
    "get_role_validation_service",
    "get_user_role_update_service",
    # Handlers
    "get_create_role_handler",
    "get_update_role_handler",
    "get_update_user_role_handler",
]
