"""Update role handler.

Flow:
1. Reject predefined roles
2. Load the custom role in merchant scope
3. Validate the new name and/or groups
4. Persist the changes
5. Invalidate the permission cache entry
6. After commit: invalidate again and repopulate from the committed row
7. Return the updated role
"""

from functools import partial

from src.application.commands.role_commands import UpdateRole
from src.application.services.role_permission_cache_service import (
    RolePermissionCacheService,
)
from src.application.services.role_validation_service import RoleValidationService
from src.core.result import Failure, Result, Success
from src.domain.entities.role import Role
from src.domain.errors import UserRoleError
from src.domain.protocols.after_commit_protocol import AfterCommitProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.role_repository import RoleRepository
from src.domain.roles import is_predefined_role
from src.domain.validators import validate_role_groups
from src.domain.value_objects import RoleName


class UpdateRoleHandler:
    """Handler for custom role updates."""

    def __init__(
        self,
        role_repo: RoleRepository,
        role_validation_service: RoleValidationService,
        cache_service: RolePermissionCacheService,
        after_commit: AfterCommitProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize update role handler with dependencies.

        Args:
            role_repo: Custom role repository.
            role_validation_service: Name uniqueness checks.
            cache_service: Permission cache maintenance.
            after_commit: Defers the cache refresh until the update is durable.
            logger: Structured logger.
        """
        self._role_repo = role_repo
        self._role_validation_service = role_validation_service
        self._cache_service = cache_service
        self._after_commit = after_commit
        self._logger = logger

    async def handle(self, cmd: UpdateRole) -> Result[Role, UserRoleError]:
        """Handle update role command.

        Returns:
            Success(Role) with the persisted role.
            Failure(UserRoleError) if the role is predefined or missing,
            the new values are invalid, or the store fails.

        Side Effects:
            - Drops the cached permission set of the role immediately.
            - Repopulates it after commit (best-effort).
        """
        if cmd.role_name is None and cmd.groups is None:
            return Failure(
                error=UserRoleError.invalid_role_operation(
                    "Nothing to update: provide a role name or groups"
                )
            )

        if is_predefined_role(cmd.role_id):
            return Failure(
                error=UserRoleError.invalid_role_operation(
                    "Predefined roles cannot be updated"
                )
            )

        match await self._role_repo.find_by_role_id_in_merchant_scope(
            cmd.role_id, cmd.merchant_id, cmd.org_id
        ):
            case Failure(error=error):
                return Failure(
                    error=UserRoleError.internal_server_error(
                        "Failed to fetch role from store",
                        cause=error,
                    )
                )
            case Success(value=None):
                return Failure(error=UserRoleError.role_not_found(cmd.role_id))
            case Success(value=role):
                pass

        if cmd.role_name is not None:
            try:
                role_name = RoleName(cmd.role_name)
            except ValueError as e:
                return Failure(error=UserRoleError.role_name_parsing_error(str(e)))

            if role_name.value != role.role_name:
                validation = await self._role_validation_service.validate_role_name(
                    role_name.value, cmd.merchant_id, cmd.org_id
                )
                if isinstance(validation, Failure):
                    return validation
                role.rename(role_name.value, modified_by=cmd.updated_by)

        if cmd.groups is not None:
            validation = validate_role_groups(cmd.groups)
            if isinstance(validation, Failure):
                return validation
            role.replace_groups(cmd.groups, modified_by=cmd.updated_by)

        match await self._role_repo.update_role(role):
            case Failure(error=error):
                return Failure(
                    error=UserRoleError.internal_server_error(
                        "Failed to update role",
                        cause=error,
                    )
                )
            case Success(value=updated):
                pass

        await self._cache_service.invalidate(updated.role_id)
        self._after_commit(
            partial(self._refresh_cache, updated.role_id, cmd.merchant_id, cmd.org_id)
        )

        self._logger.info(
            "role_updated",
            role_id=updated.role_id,
            merchant_id=cmd.merchant_id,
            org_id=cmd.org_id,
        )
        return Success(value=updated)

    async def _refresh_cache(self, role_id: str, merchant_id: str, org_id: str) -> None:
        # Readers may have re-cached the old row between invalidate and commit.
        await self._cache_service.invalidate(role_id)
        await self._cache_service.get_or_populate(role_id, merchant_id, org_id)
