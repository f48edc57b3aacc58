"""Unit tests for role group validation.

Tests cover:
- Valid group lists (any order, any subset of assignable groups)
- Empty lists, reserved group and duplicates are rejected
"""

import itertools

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import PermissionGroup
from src.domain.validators import validate_role_groups

ASSIGNABLE_GROUPS = [
    group for group in PermissionGroup if group is not PermissionGroup.ORGANIZATION_MANAGE
]


@pytest.mark.unit
class TestValidateRoleGroupsSuccess:
    """Test accepted group lists."""

    @pytest.mark.parametrize("size", [1, 2, 5, len(ASSIGNABLE_GROUPS)])
    def test_duplicate_free_lists_without_reserved_group_succeed(self, size):
        groups = ASSIGNABLE_GROUPS[:size]

        assert isinstance(validate_role_groups(groups), Success)

    def test_order_is_irrelevant(self):
        for groups in itertools.permutations(ASSIGNABLE_GROUPS[:3]):
            assert isinstance(validate_role_groups(list(groups)), Success)

    def test_tuples_are_accepted(self):
        result = validate_role_groups(
            (PermissionGroup.OPERATIONS_VIEW, PermissionGroup.ANALYTICS_VIEW)
        )

        assert result == Success(value=None)


@pytest.mark.unit
class TestValidateRoleGroupsFailure:
    """Test rejected group lists."""

    def test_empty_list_fails(self):
        result = validate_role_groups([])

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ROLE_OPERATION

    @pytest.mark.parametrize(
        "groups",
        [
            [PermissionGroup.ORGANIZATION_MANAGE],
            [PermissionGroup.OPERATIONS_VIEW, PermissionGroup.ORGANIZATION_MANAGE],
            ASSIGNABLE_GROUPS + [PermissionGroup.ORGANIZATION_MANAGE],
        ],
    )
    def test_reserved_group_fails(self, groups):
        result = validate_role_groups(groups)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ROLE_OPERATION

    @pytest.mark.parametrize("group", ASSIGNABLE_GROUPS)
    def test_duplicate_group_fails(self, group):
        result = validate_role_groups([group, PermissionGroup.RECON_OPS, group])

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ROLE_OPERATION
        assert "Duplicate" in result.error.message
