"""Repository dependency factories.

Session-scoped repository instances. Every repository built for one unit
of work shares that unit's session.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.persistence.repositories import (
    MerchantAccountRepository,
    RoleRepository,
    UserRoleRepository,
)


def get_role_repository(session: AsyncSession) -> RoleRepository:
    """Get custom role repository bound to a session."""
    return RoleRepository(session=session)


def get_user_role_repository(session: AsyncSession) -> UserRoleRepository:
    """Get user-role assignment repository bound to a session."""
    return UserRoleRepository(session=session)


def get_merchant_account_repository(
    session: AsyncSession,
) -> MerchantAccountRepository:
    """Get merchant account repository bound to a session."""
    return MerchantAccountRepository(session=session)
