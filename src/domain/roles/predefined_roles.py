"""Predefined roles shared by every merchant.

The table is built once at import time and exposed as a read-only mapping.
It is never mutated or torn down. Lookups by role_id are O(1).

Usage:
    from src.domain.roles import PREDEFINED_ROLES, get_predefined_role

    role_info = get_predefined_role(role_id)
    if role_info is not None:
        permissions = role_info.get_permissions_set()
"""

from types import MappingProxyType

from src.domain.enums import EntityType, PermissionGroup, RoleScope
from src.domain.value_objects.role_info import RoleInfo

ROLE_ID_INTERNAL_ADMIN = "internal_admin"
ROLE_ID_INTERNAL_VIEW_ONLY = "internal_view_only"
ROLE_ID_ORGANIZATION_ADMIN = "org_admin"
ROLE_ID_MERCHANT_ADMIN = "merchant_admin"
ROLE_ID_MERCHANT_VIEW_ONLY = "merchant_view_only"
ROLE_ID_MERCHANT_IAM_ADMIN = "merchant_iam_admin"
ROLE_ID_MERCHANT_DEVELOPER = "merchant_developer"
ROLE_ID_MERCHANT_OPERATOR = "merchant_operator"
ROLE_ID_MERCHANT_CUSTOMER_SUPPORT = "merchant_customer_support"

_ALL_VIEW_GROUPS: tuple[PermissionGroup, ...] = (
    PermissionGroup.OPERATIONS_VIEW,
    PermissionGroup.CONNECTORS_VIEW,
    PermissionGroup.WORKFLOWS_VIEW,
    PermissionGroup.ANALYTICS_VIEW,
    PermissionGroup.USERS_VIEW,
    PermissionGroup.MERCHANT_DETAILS_VIEW,
)

_ALL_MERCHANT_GROUPS: tuple[PermissionGroup, ...] = (
    *_ALL_VIEW_GROUPS,
    PermissionGroup.OPERATIONS_MANAGE,
    PermissionGroup.CONNECTORS_MANAGE,
    PermissionGroup.WORKFLOWS_MANAGE,
    PermissionGroup.USERS_MANAGE,
    PermissionGroup.MERCHANT_DETAILS_MANAGE,
)


def _build_predefined_roles() -> dict[str, RoleInfo]:
    roles = [
        RoleInfo(
            role_id=ROLE_ID_INTERNAL_ADMIN,
            role_name="internal_admin",
            groups=_ALL_MERCHANT_GROUPS,
            scope=RoleScope.ORGANIZATION,
            entity_type=EntityType.INTERNAL,
            is_invitable=False,
            is_deletable=False,
            is_updatable=False,
            is_internal=True,
        ),
        RoleInfo(
            role_id=ROLE_ID_INTERNAL_VIEW_ONLY,
            role_name="internal_view_only",
            groups=_ALL_VIEW_GROUPS,
            scope=RoleScope.ORGANIZATION,
            entity_type=EntityType.INTERNAL,
            is_invitable=False,
            is_deletable=False,
            is_updatable=False,
            is_internal=True,
        ),
        RoleInfo(
            role_id=ROLE_ID_ORGANIZATION_ADMIN,
            role_name="organization_admin",
            groups=(*_ALL_MERCHANT_GROUPS, PermissionGroup.ORGANIZATION_MANAGE),
            scope=RoleScope.ORGANIZATION,
            entity_type=EntityType.ORGANIZATION,
            is_invitable=False,
            is_deletable=False,
            is_updatable=False,
        ),
        RoleInfo(
            role_id=ROLE_ID_MERCHANT_ADMIN,
            role_name="admin",
            groups=_ALL_MERCHANT_GROUPS,
            scope=RoleScope.ORGANIZATION,
            entity_type=EntityType.MERCHANT,
            is_deletable=False,
        ),
        RoleInfo(
            role_id=ROLE_ID_MERCHANT_VIEW_ONLY,
            role_name="view_only",
            groups=_ALL_VIEW_GROUPS,
            scope=RoleScope.ORGANIZATION,
            entity_type=EntityType.MERCHANT,
            is_deletable=False,
        ),
        RoleInfo(
            role_id=ROLE_ID_MERCHANT_IAM_ADMIN,
            role_name="iam",
            groups=(
                PermissionGroup.OPERATIONS_VIEW,
                PermissionGroup.ANALYTICS_VIEW,
                PermissionGroup.USERS_VIEW,
                PermissionGroup.USERS_MANAGE,
                PermissionGroup.MERCHANT_DETAILS_VIEW,
            ),
            scope=RoleScope.ORGANIZATION,
            entity_type=EntityType.MERCHANT,
            is_deletable=False,
        ),
        RoleInfo(
            role_id=ROLE_ID_MERCHANT_DEVELOPER,
            role_name="developer",
            groups=(
                PermissionGroup.OPERATIONS_VIEW,
                PermissionGroup.CONNECTORS_VIEW,
                PermissionGroup.ANALYTICS_VIEW,
                PermissionGroup.USERS_VIEW,
                PermissionGroup.MERCHANT_DETAILS_VIEW,
                PermissionGroup.MERCHANT_DETAILS_MANAGE,
            ),
            scope=RoleScope.ORGANIZATION,
            entity_type=EntityType.MERCHANT,
            is_deletable=False,
        ),
        RoleInfo(
            role_id=ROLE_ID_MERCHANT_OPERATOR,
            role_name="operator",
            groups=(
                PermissionGroup.OPERATIONS_VIEW,
                PermissionGroup.OPERATIONS_MANAGE,
                PermissionGroup.CONNECTORS_VIEW,
                PermissionGroup.WORKFLOWS_VIEW,
                PermissionGroup.ANALYTICS_VIEW,
                PermissionGroup.USERS_VIEW,
                PermissionGroup.MERCHANT_DETAILS_VIEW,
            ),
            scope=RoleScope.ORGANIZATION,
            entity_type=EntityType.MERCHANT,
            is_deletable=False,
        ),
        RoleInfo(
            role_id=ROLE_ID_MERCHANT_CUSTOMER_SUPPORT,
            role_name="customer_support",
            groups=(
                PermissionGroup.OPERATIONS_VIEW,
                PermissionGroup.ANALYTICS_VIEW,
                PermissionGroup.USERS_VIEW,
                PermissionGroup.MERCHANT_DETAILS_VIEW,
            ),
            scope=RoleScope.ORGANIZATION,
            entity_type=EntityType.MERCHANT,
            is_deletable=False,
        ),
    ]
    return {role.role_id: role for role in roles}


PREDEFINED_ROLES: MappingProxyType[str, RoleInfo] = MappingProxyType(
    _build_predefined_roles()
)
"""Read-only role_id -> RoleInfo table of predefined roles."""


def get_predefined_role(role_id: str) -> RoleInfo | None:
    """Look up a predefined role.

    Args:
        role_id: Role identifier.

    Returns:
        RoleInfo if role_id names a predefined role, None otherwise.
    """
    return PREDEFINED_ROLES.get(role_id)


def is_predefined_role(role_id: str) -> bool:
    """Check whether role_id names a predefined role."""
    return role_id in PREDEFINED_ROLES


def is_predefined_role_name(role_name: str) -> bool:
    """Check whether any predefined role uses this exact (case-sensitive) name."""
    return any(
        role_info.get_role_name() == role_name
        for role_info in PREDEFINED_ROLES.values()
    )
