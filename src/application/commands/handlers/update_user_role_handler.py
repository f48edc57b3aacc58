"""Update user role handler.

Flow:
1. Resolve the target role in the caller's scope
2. Reject internal roles
3. Apply the role change to V1 and V2 assignments
4. Fail only if both versions failed
5. After commit: populate the permission cache for the new role (best-effort)
"""

from functools import partial

from src.application.commands.role_commands import UpdateUserRole
from src.application.services.role_permission_cache_service import (
    RolePermissionCacheService,
)
from src.application.services.role_registry import RoleRegistry
from src.application.services.user_role_update_service import (
    DualVersionUpdateResult,
    UserRoleUpdateService,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.user_role import UpdateRole
from src.domain.errors import UserRoleError
from src.domain.protocols.after_commit_protocol import AfterCommitProtocol


class UpdateUserRoleHandler:
    """Handler for changing a user's role."""

    def __init__(
        self,
        role_registry: RoleRegistry,
        user_role_update_service: UserRoleUpdateService,
        cache_service: RolePermissionCacheService,
        after_commit: AfterCommitProtocol,
    ) -> None:
        """Initialize update user role handler with dependencies.

        Args:
            role_registry: Resolves the target role.
            user_role_update_service: Dual-version assignment updates.
            cache_service: Permission cache maintenance.
            after_commit: Defers cache population until the update is durable.
        """
        self._role_registry = role_registry
        self._user_role_update_service = user_role_update_service
        self._cache_service = cache_service
        self._after_commit = after_commit

    async def handle(
        self,
        cmd: UpdateUserRole,
    ) -> Result[DualVersionUpdateResult, UserRoleError]:
        """Handle update user role command.

        Returns:
            Success(DualVersionUpdateResult) if at least one version was
            updated. Failure(UserRoleError) if the role cannot be
            resolved, is internal, or both versions failed.
        """
        match await self._role_registry.resolve(
            cmd.role_id, cmd.merchant_id, cmd.org_id
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=role_info):
                if role_info.is_internal:
                    return Failure(
                        error=UserRoleError.invalid_role_operation(
                            "Internal roles cannot be assigned"
                        )
                    )

        dual_result = await self._user_role_update_service.update_v1_and_v2_user_roles(
            cmd.user_id,
            cmd.org_id,
            cmd.merchant_id,
            cmd.profile_id,
            UpdateRole(role_id=cmd.role_id, modified_by=cmd.updated_by),
        )

        if not dual_result.any_succeeded:
            cause = dual_result.v1.error if isinstance(dual_result.v1, Failure) else None
            return Failure(
                error=UserRoleError.internal_server_error(
                    "Failed to update user role",
                    cause=cause,
                )
            )

        self._after_commit(
            partial(
                self._cache_service.get_or_populate,
                cmd.role_id,
                cmd.merchant_id,
                cmd.org_id,
            )
        )
        return Success(value=dual_result)
