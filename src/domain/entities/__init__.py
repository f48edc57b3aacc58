"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.merchant_account import MerchantAccount
from src.domain.entities.role import Role
from src.domain.entities.user_role import (
    UpdateRole,
    UpdateStatus,
    UserRole,
    UserRoleUpdate,
)

__all__ = [
    "MerchantAccount",
    "Role",
    "UpdateRole",
    "UpdateStatus",
    "UserRole",
    "UserRoleUpdate",
]
