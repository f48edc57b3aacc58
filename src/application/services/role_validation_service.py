"""Role validation service.

Checks that a candidate role name is free within a merchant scope.
Group composition checks are pure and live in
src/domain/validators/role_validators.py.
"""

from src.core.result import Failure, Result, Success
from src.domain.errors import UserRoleError
from src.domain.protocols.role_repository import RoleRepository
from src.domain.roles import is_predefined_role_name


class RoleValidationService:
    """Validates role names against predefined and in-scope custom roles."""

    def __init__(self, role_repo: RoleRepository) -> None:
        """Initialize service with the role store.

        Args:
            role_repo: Custom role repository.
        """
        self._role_repo = role_repo

    async def validate_role_name(
        self,
        role_name: str,
        merchant_id: str,
        org_id: str,
    ) -> Result[None, UserRoleError]:
        """Check that role_name is not already taken.

        Matching is exact and case-sensitive. Predefined names clash in
        every scope; custom names clash only within (merchant_id, org_id).

        Args:
            role_name: Candidate name (already normalized by RoleName).
            merchant_id: Merchant creating the role.
            org_id: Organization of that merchant.

        Returns:
            Success(None) if the name is free.
            Failure(ROLE_NAME_ALREADY_EXISTS) on a clash.
            Failure(INTERNAL_SERVER_ERROR) if the store lookup fails.
        """
        if is_predefined_role_name(role_name):
            return Failure(error=UserRoleError.role_name_already_exists(role_name))

        match await self._role_repo.find_by_role_name(role_name, merchant_id, org_id):
            case Failure(error=error):
                return Failure(
                    error=UserRoleError.internal_server_error(
                        "Failed to look up role name",
                        cause=error,
                    )
                )
            case Success(value=None):
                return Success(value=None)
            case Success():
                return Failure(
                    error=UserRoleError.role_name_already_exists(role_name)
                )
