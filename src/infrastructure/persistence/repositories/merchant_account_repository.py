"""Merchant account repository implementation.

Read-only PostgreSQL implementation of the MerchantAccountRepository
protocol.
"""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.merchant_account import MerchantAccount
from src.infrastructure.persistence.error_mapping import database_error_from
from src.infrastructure.persistence.models.merchant_account import (
    MerchantAccountModel,
)


class MerchantAccountRepository:
    """PostgreSQL implementation of MerchantAccountRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def list_merchant_accounts_by_organization_id(
        self,
        org_id: str,
    ) -> Result[list[MerchantAccount], DomainError]:
        """List merchant accounts of an organization (store order)."""
        stmt = select(MerchantAccountModel).where(
            MerchantAccountModel.organization_id == org_id
        )
        try:
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        except SQLAlchemyError as e:
            return Failure(
                error=database_error_from(
                    e,
                    "Failed to list merchant accounts",
                    org_id=org_id,
                )
            )
        return Success(
            value=[
                MerchantAccount(
                    merchant_id=m.merchant_id,
                    organization_id=m.organization_id,
                    merchant_name=m.merchant_name,
                )
                for m in models
            ]
        )
