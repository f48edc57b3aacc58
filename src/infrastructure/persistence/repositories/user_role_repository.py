"""User-role repository implementation.

PostgreSQL implementation of the UserRoleRepository protocol. Rows are
addressed by (user_id, org_id, merchant_id, profile_id, version).
"""

from datetime import UTC, datetime

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.user_role import (
    UpdateRole,
    UpdateStatus,
    UserRole,
    UserRoleUpdate,
)
from src.domain.enums import EntityType, UserRoleVersion, UserStatus
from src.infrastructure.persistence.error_mapping import (
    database_error_from,
    record_not_found,
)
from src.infrastructure.persistence.models.user_role import UserRoleModel


class UserRoleRepository:
    """PostgreSQL implementation of UserRoleRepository protocol.

    Each update runs in its own SAVEPOINT. V1 and V2 updates share the
    caller's transaction, so a failed V2 write must not undo V1.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def find_by_user_id_and_lineage(
        self,
        user_id: str,
        org_id: str,
        merchant_id: str,
        profile_id: str | None,
        version: UserRoleVersion,
    ) -> Result[UserRole | None, DomainError]:
        """Find the assignment of a user within a lineage."""
        stmt = self._lineage_stmt(user_id, org_id, merchant_id, profile_id, version)
        try:
            result = await self._session.execute(stmt)
            model = result.scalars().first()
        except SQLAlchemyError as e:
            return Failure(
                error=database_error_from(
                    e,
                    "Failed to find user role",
                    user_id=user_id,
                    version=version.value,
                )
            )
        if model is None:
            return Success(value=None)
        return Success(value=self._to_entity(model))

    async def update_user_role_by_user_id_and_lineage(
        self,
        user_id: str,
        org_id: str,
        merchant_id: str,
        profile_id: str | None,
        update: UserRoleUpdate,
        version: UserRoleVersion,
    ) -> Result[UserRole, DomainError]:
        """Apply an update to the assignment identified by user and lineage."""
        stmt = self._lineage_stmt(user_id, org_id, merchant_id, profile_id, version)
        try:
            async with self._session.begin_nested():
                result = await self._session.execute(stmt)
                model = result.scalars().first()
                if model is None:
                    return Failure(
                        error=record_not_found(
                            ErrorCode.USER_ROLE_NOT_FOUND,
                            "User role not found for lineage",
                            user_id=user_id,
                            version=version.value,
                        )
                    )

                match update:
                    case UpdateStatus(status=status, modified_by=modified_by):
                        model.status = status.value
                    case UpdateRole(role_id=role_id, modified_by=modified_by):
                        model.role_id = role_id
                model.last_modified_by = modified_by
                model.updated_at = datetime.now(UTC)

                await self._session.flush()
        except SQLAlchemyError as e:
            return Failure(
                error=database_error_from(
                    e,
                    "Failed to update user role",
                    user_id=user_id,
                    version=version.value,
                )
            )
        return Success(value=self._to_entity(model))

    @staticmethod
    def _lineage_stmt(
        user_id: str,
        org_id: str,
        merchant_id: str,
        profile_id: str | None,
        version: UserRoleVersion,
    ) -> Select[tuple[UserRoleModel]]:
        stmt = select(UserRoleModel).where(
            UserRoleModel.user_id == user_id,
            UserRoleModel.org_id == org_id,
            UserRoleModel.merchant_id == merchant_id,
            UserRoleModel.version == version.value,
        )
        if profile_id is None:
            return stmt.where(UserRoleModel.profile_id.is_(None))
        return stmt.where(UserRoleModel.profile_id == profile_id)

    def _to_entity(self, model: UserRoleModel) -> UserRole:
        """Map database model to domain entity."""
        return UserRole(
            user_id=model.user_id,
            role_id=model.role_id,
            org_id=model.org_id,
            merchant_id=model.merchant_id,
            profile_id=model.profile_id,
            entity_type=EntityType(model.entity_type) if model.entity_type else None,
            status=UserStatus(model.status),
            version=UserRoleVersion(model.version),
            created_by=model.created_by,
            last_modified_by=model.last_modified_by,
            created_at=model.created_at,
            last_modified=model.updated_at,
        )
