"""Domain protocols (ports) package.

Protocol definitions the domain and application layers depend on.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import RoleRepository, RolePermissionCacheProtocol
"""

# Service protocols
from src.domain.protocols.after_commit_protocol import AfterCommitProtocol
from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.role_permission_cache_protocol import (
    RolePermissionCacheProtocol,
)

# Repository protocols
from src.domain.protocols.merchant_account_repository import (
    MerchantAccountRepository,
)
from src.domain.protocols.role_repository import RoleRepository
from src.domain.protocols.user_role_repository import UserRoleRepository

__all__ = [
    # Service protocols
    "AfterCommitProtocol",
    "CacheProtocol",
    "LoggerProtocol",
    "RolePermissionCacheProtocol",
    # Repository protocols
    "MerchantAccountRepository",
    "RoleRepository",
    "UserRoleRepository",
]
