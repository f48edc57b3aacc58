"""Merchant resolver service.

Derives a single merchant_id from a user-role assignment. Organization
level assignments carry no merchant of their own, so the first merchant
account of the organization stands in for it.
"""

from src.core.result import Failure, Result, Success
from src.domain.entities.user_role import UserRole
from src.domain.enums import EntityType
from src.domain.errors import UserRoleError
from src.domain.protocols.merchant_account_repository import (
    MerchantAccountRepository,
)


class MerchantResolver:
    """Resolves the merchant an assignment acts for."""

    def __init__(self, merchant_account_repo: MerchantAccountRepository) -> None:
        """Initialize resolver with the merchant account store.

        Args:
            merchant_account_repo: Merchant account repository.
        """
        self._merchant_account_repo = merchant_account_repo

    async def get_single_merchant_id(
        self,
        user_role: UserRole,
    ) -> Result[str, UserRoleError]:
        """Return the merchant_id a user role acts for.

        Organization assignments: org_id is required (checked before any
        store call) and the first merchant account of the organization is
        returned, in store order. Every other entity type, including a
        missing one, returns the assignment's own merchant_id.

        Returns:
            Success(merchant_id) or Failure(INTERNAL_SERVER_ERROR).
        """
        if user_role.entity_type is not EntityType.ORGANIZATION:
            if user_role.merchant_id is None:
                return Failure(
                    error=UserRoleError.internal_server_error(
                        "merchant_id not found for user role"
                    )
                )
            return Success(value=user_role.merchant_id)

        if user_role.org_id is None:
            return Failure(
                error=UserRoleError.internal_server_error(
                    "org_id not found for organization user role"
                )
            )

        match await self._merchant_account_repo.list_merchant_accounts_by_organization_id(
            user_role.org_id
        ):
            case Failure(error=error):
                return Failure(
                    error=UserRoleError.internal_server_error(
                        "Failed to list merchant accounts",
                        cause=error,
                    )
                )
            case Success(value=[]):
                return Failure(
                    error=UserRoleError.internal_server_error(
                        "No merchant account found for organization"
                    )
                )
            case Success(value=[first, *_]):
                return Success(value=first.get_id())
