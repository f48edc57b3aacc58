"""Application services for role resolution, caching and assignment."""

from src.application.services.merchant_resolver import MerchantResolver
from src.application.services.role_permission_cache_service import (
    RolePermissionCacheService,
)
from src.application.services.role_registry import RoleRegistry
from src.application.services.role_validation_service import RoleValidationService
from src.application.services.user_role_update_service import (
    DualVersionOutcome,
    DualVersionUpdateResult,
    UserRoleUpdateService,
)

__all__ = [
    "DualVersionOutcome",
    "DualVersionUpdateResult",
    "MerchantResolver",
    "RolePermissionCacheService",
    "RoleRegistry",
    "RoleValidationService",
    "UserRoleUpdateService",
]
