"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.

Available Enums:
    - Permission: Fine-grained capabilities
    - PermissionGroup: Assignable bundles of permissions
    - EntityType: Scope level of a role (organization, merchant, ...)
    - RoleScope: Visibility of a role definition
    - UserRoleVersion: Coexisting storage schema versions (v1, v2)
    - UserStatus: Assignment lifecycle status
"""

from src.domain.enums.entity_type import EntityType
from src.domain.enums.permission import Permission
from src.domain.enums.permission_group import (
    PermissionGroup,
    get_permissions_for_groups,
)
from src.domain.enums.role_scope import RoleScope
from src.domain.enums.user_role_version import UserRoleVersion
from src.domain.enums.user_status import UserStatus

__all__ = [
    "EntityType",
    "Permission",
    "PermissionGroup",
    "RoleScope",
    "UserRoleVersion",
    "UserStatus",
    "get_permissions_for_groups",
]
