"""Unit tests for RoleInfo and the predefined role table.

Tests cover:
- Permission expansion from groups
- Projection of custom roles
- Predefined table contents and lookups
"""

from types import MappingProxyType

import pytest

from src.domain.enums import EntityType, Permission, PermissionGroup, RoleScope
from src.domain.roles import (
    PREDEFINED_ROLES,
    ROLE_ID_INTERNAL_ADMIN,
    ROLE_ID_MERCHANT_ADMIN,
    ROLE_ID_MERCHANT_VIEW_ONLY,
    ROLE_ID_ORGANIZATION_ADMIN,
    get_predefined_role,
    is_predefined_role,
    is_predefined_role_name,
)
from src.domain.value_objects import RoleInfo
from tests.conftest import create_role


@pytest.mark.unit
class TestRoleInfo:
    """Test RoleInfo behavior."""

    def test_from_role_copies_identity_and_groups(self):
        role = create_role(groups=[PermissionGroup.USERS_VIEW])

        role_info = RoleInfo.from_role(role)

        assert role_info.role_id == role.role_id
        assert role_info.get_role_name() == role.role_name
        assert role_info.groups == (PermissionGroup.USERS_VIEW,)
        assert role_info.scope is RoleScope.MERCHANT
        assert role_info.entity_type is EntityType.MERCHANT

    def test_from_role_marks_custom_roles_mutable_and_external(self):
        role_info = RoleInfo.from_role(create_role())

        assert role_info.is_invitable
        assert role_info.is_deletable
        assert role_info.is_updatable
        assert not role_info.is_internal

    def test_get_permissions_set_expands_groups(self):
        role_info = RoleInfo.from_role(
            create_role(groups=[PermissionGroup.USERS_MANAGE])
        )

        assert role_info.get_permissions_set() == frozenset(
            {Permission.USERS_WRITE, Permission.MERCHANT_ACCOUNT_READ}
        )
        assert role_info.has_permission(Permission.USERS_WRITE)
        assert not role_info.has_permission(Permission.PAYMENT_WRITE)


@pytest.mark.unit
class TestPredefinedRoles:
    """Test the predefined role table."""

    def test_table_is_read_only(self):
        assert isinstance(PREDEFINED_ROLES, MappingProxyType)
        with pytest.raises(TypeError):
            PREDEFINED_ROLES["new"] = PREDEFINED_ROLES[ROLE_ID_MERCHANT_ADMIN]  # type: ignore[index]

    def test_table_has_nine_roles_keyed_by_id(self):
        assert len(PREDEFINED_ROLES) == 9
        for role_id, role_info in PREDEFINED_ROLES.items():
            assert role_info.role_id == role_id

    def test_lookup_by_id(self):
        assert get_predefined_role(ROLE_ID_MERCHANT_ADMIN).role_name == "admin"
        assert get_predefined_role("role_custom_1") is None
        assert is_predefined_role(ROLE_ID_MERCHANT_VIEW_ONLY)
        assert not is_predefined_role("role_custom_1")

    def test_name_lookup_is_exact_and_case_sensitive(self):
        assert is_predefined_role_name("admin")
        assert not is_predefined_role_name("Admin")
        assert not is_predefined_role_name(" admin")

    def test_only_org_admin_holds_reserved_group(self):
        holders = [
            role_id
            for role_id, role_info in PREDEFINED_ROLES.items()
            if PermissionGroup.ORGANIZATION_MANAGE in role_info.groups
        ]

        assert holders == [ROLE_ID_ORGANIZATION_ADMIN]

    def test_internal_roles_are_not_invitable(self):
        role_info = PREDEFINED_ROLES[ROLE_ID_INTERNAL_ADMIN]

        assert role_info.is_internal
        assert not role_info.is_invitable
        assert role_info.entity_type is EntityType.INTERNAL
