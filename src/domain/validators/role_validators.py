"""Role definition validators.

Pure functions run before a role definition is persisted. They return
Result types rather than raising, so command handlers can chain them.

Usage:
    from src.domain.validators import validate_role_groups

    match validate_role_groups(cmd.groups):
        case Failure(error=err):
            return Failure(error=err)
        case Success():
            ...
"""

from collections.abc import Sequence

from src.core.result import Failure, Result, Success
from src.domain.enums import PermissionGroup
from src.domain.errors import UserRoleError


def validate_role_groups(
    groups: Sequence[PermissionGroup],
) -> Result[None, UserRoleError]:
    """Validate the permission groups of a role definition.

    Order is irrelevant; duplicates are detected by set comparison.

    Args:
        groups: Permission groups requested for the role.

    Returns:
        Success(None) if the groups are valid.
        Failure(UserRoleError) with INVALID_ROLE_OPERATION if groups is
        empty, contains the reserved ORGANIZATION_MANAGE group, or contains
        duplicates.
    """
    if not groups:
        return Failure(
            error=UserRoleError.invalid_role_operation("Role groups cannot be empty")
        )

    unique_groups = set(groups)

    if PermissionGroup.ORGANIZATION_MANAGE in unique_groups:
        return Failure(
            error=UserRoleError.invalid_role_operation(
                "Organization manage group cannot be added to role"
            )
        )

    if len(unique_groups) != len(groups):
        return Failure(
            error=UserRoleError.invalid_role_operation(
                "Duplicate permission group found"
            )
        )

    return Success(value=None)
