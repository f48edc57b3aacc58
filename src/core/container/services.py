"""Application service and command handler factories.

Services and handlers are session-scoped: each call wires fresh instances
around the repositories of one unit of work, plus the app-scoped cache
and logger singletons.

Usage:
    async for session in get_db_session():
        cache_service = get_role_permission_cache_service(session)
        await cache_service.populate_by_user_role(user_role)
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.application.commands.handlers.create_role_handler import (
    CreateRoleHandler,
)
from src.application.commands.handlers.update_role_handler import (
    UpdateRoleHandler,
)
from src.application.commands.handlers.update_user_role_handler import (
    UpdateUserRoleHandler,
)
from src.application.services import (
    MerchantResolver,
    RolePermissionCacheService,
    RoleRegistry,
    RoleValidationService,
    UserRoleUpdateService,
)
from src.core.config import get_settings
from src.core.container.infrastructure import (
    get_after_commit,
    get_logger,
    get_role_permission_cache,
)
from src.core.container.repositories import (
    get_merchant_account_repository,
    get_role_repository,
    get_user_role_repository,
)


# ============================================================================
# Services
# ============================================================================


def get_role_registry(session: AsyncSession) -> RoleRegistry:
    """Get role registry bound to a session."""
    return RoleRegistry(role_repo=get_role_repository(session))


def get_role_validation_service(session: AsyncSession) -> RoleValidationService:
    """Get role name validation service bound to a session."""
    return RoleValidationService(role_repo=get_role_repository(session))


def get_role_permission_cache_service(
    session: AsyncSession,
) -> RolePermissionCacheService:
    """Get permission cache service bound to a session.

    Entry TTL is the configured token lifetime.
    """
    return RolePermissionCacheService(
        role_registry=get_role_registry(session),
        permission_cache=get_role_permission_cache(),
        ttl_seconds=get_settings().jwt_token_time_in_secs,
        logger=get_logger(),
    )


def get_user_role_update_service(session: AsyncSession) -> UserRoleUpdateService:
    """Get dual-version user-role update service bound to a session."""
    return UserRoleUpdateService(
        user_role_repo=get_user_role_repository(session),
        logger=get_logger(),
    )


def get_merchant_resolver(session: AsyncSession) -> MerchantResolver:
    """Get merchant resolver bound to a session."""
    return MerchantResolver(
        merchant_account_repo=get_merchant_account_repository(session),
    )


# ============================================================================
# Command Handlers
# ============================================================================


def get_create_role_handler(session: AsyncSession) -> CreateRoleHandler:
    """Get create role handler bound to a session."""
    return CreateRoleHandler(
        role_repo=get_role_repository(session),
        role_validation_service=get_role_validation_service(session),
        logger=get_logger(),
    )


def get_update_role_handler(session: AsyncSession) -> UpdateRoleHandler:
    """Get update role handler bound to a session."""
    return UpdateRoleHandler(
        role_repo=get_role_repository(session),
        role_validation_service=get_role_validation_service(session),
        cache_service=get_role_permission_cache_service(session),
        after_commit=get_after_commit(session),
        logger=get_logger(),
    )


def get_update_user_role_handler(session: AsyncSession) -> UpdateUserRoleHandler:
    """Get update user role handler bound to a session."""
    return UpdateUserRoleHandler(
        role_registry=get_role_registry(session),
        user_role_update_service=get_user_role_update_service(session),
        cache_service=get_role_permission_cache_service(session),
        after_commit=get_after_commit(session),
    )
