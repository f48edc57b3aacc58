"""Database models for persistence layer.

SQLAlchemy models that map to database tables. These are infrastructure
concerns and are never imported by the domain layer.

Models:
    - role.py: Custom roles
    - user_role.py: User-role assignments (one row per schema version)
    - merchant_account.py: Merchant accounts (organization membership)
"""

from src.infrastructure.persistence.models.merchant_account import (
    MerchantAccountModel,
)
from src.infrastructure.persistence.models.role import RoleModel
from src.infrastructure.persistence.models.user_role import UserRoleModel

__all__ = [
    "MerchantAccountModel",
    "RoleModel",
    "UserRoleModel",
]
