"""MerchantAccountRepository protocol.

Port used by merchant resolution to enumerate the merchants of an
organization.
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities.merchant_account import MerchantAccount


class MerchantAccountRepository(Protocol):
    """Merchant account repository protocol (port)."""

    async def list_merchant_accounts_by_organization_id(
        self,
        org_id: str,
    ) -> Result[list[MerchantAccount], DomainError]:
        """List merchant accounts of an organization.

        Order is whatever the store returns; callers must not rely on it.

        Args:
            org_id: Organization identifier.

        Returns:
            Success(list of merchant accounts) or Failure(DatabaseError).
        """
        ...
