"""Repository implementations (SQLAlchemy, async)."""

from src.infrastructure.persistence.repositories.merchant_account_repository import (
    MerchantAccountRepository,
)
from src.infrastructure.persistence.repositories.role_repository import (
    RoleRepository,
)
from src.infrastructure.persistence.repositories.user_role_repository import (
    UserRoleRepository,
)

__all__ = [
    "MerchantAccountRepository",
    "RoleRepository",
    "UserRoleRepository",
]
