"""Create role handler.

Flow:
1. Parse the role name
2. Check scope against the creator's entity type
3. Validate permission groups
4. Check the name is free in scope
5. Insert the role
6. Return the created role

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repositories are injected via protocols)
"""

from uuid_extensions import uuid7

from src.application.commands.role_commands import CreateRole
from src.application.services.role_validation_service import RoleValidationService
from src.core.constants import ROLE_ID_PREFIX
from src.core.result import Failure, Result, Success
from src.domain.entities.role import Role
from src.domain.enums import EntityType, RoleScope
from src.domain.errors import UserRoleError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.role_repository import RoleRepository
from src.domain.validators import validate_role_groups
from src.domain.value_objects import RoleName


class CreateRoleHandler:
    """Handler for custom role creation."""

    def __init__(
        self,
        role_repo: RoleRepository,
        role_validation_service: RoleValidationService,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize create role handler with dependencies.

        Args:
            role_repo: Custom role repository.
            role_validation_service: Name uniqueness checks.
            logger: Structured logger.
        """
        self._role_repo = role_repo
        self._role_validation_service = role_validation_service
        self._logger = logger

    async def handle(self, cmd: CreateRole) -> Result[Role, UserRoleError]:
        """Handle create role command.

        Args:
            cmd: CreateRole command.

        Returns:
            Success(Role) with the persisted role.
            Failure(UserRoleError) on validation or store failure.
        """
        try:
            role_name = RoleName(cmd.role_name)
        except ValueError as e:
            return Failure(error=UserRoleError.role_name_parsing_error(str(e)))

        if (
            cmd.scope is RoleScope.ORGANIZATION
            and cmd.entity_type is not EntityType.ORGANIZATION
        ):
            return Failure(
                error=UserRoleError.invalid_role_operation(
                    "Organization scoped roles require an organization level user"
                )
            )

        validation = validate_role_groups(cmd.groups)
        if isinstance(validation, Failure):
            return validation

        validation = await self._role_validation_service.validate_role_name(
            role_name.value, cmd.merchant_id, cmd.org_id
        )
        if isinstance(validation, Failure):
            return validation

        role = Role(
            role_id=f"{ROLE_ID_PREFIX}{uuid7().hex}",
            role_name=role_name.value,
            merchant_id=cmd.merchant_id,
            org_id=cmd.org_id,
            groups=list(cmd.groups),
            scope=cmd.scope,
            entity_type=cmd.entity_type,
            created_by=cmd.created_by,
            last_modified_by=cmd.created_by,
        )

        match await self._role_repo.insert_role(role):
            case Failure(error=error):
                return Failure(
                    error=UserRoleError.internal_server_error(
                        "Failed to insert role",
                        cause=error,
                    )
                )
            case Success(value=inserted):
                self._logger.info(
                    "role_created",
                    role_id=inserted.role_id,
                    merchant_id=cmd.merchant_id,
                    org_id=cmd.org_id,
                    scope=cmd.scope.value,
                )
                return Success(value=inserted)
