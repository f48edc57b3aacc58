"""Role repository implementation.

PostgreSQL implementation of the RoleRepository protocol.
Maps between the Role domain entity and RoleModel.

Visibility rule for a merchant scope (merchant_id, org_id): roles created
by the merchant itself, plus organization-scoped roles of the same
organization.
"""

from sqlalchemy import ColumnElement, and_, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.role import Role
from src.domain.enums import EntityType, PermissionGroup, RoleScope
from src.infrastructure.persistence.error_mapping import database_error_from
from src.infrastructure.persistence.models.role import RoleModel


class RoleRepository:
    """PostgreSQL implementation of RoleRepository protocol.

    Handles persistence of custom roles using SQLAlchemy async sessions.
    Every SQLAlchemyError is returned as Failure(DatabaseError). Writes run
    in a SAVEPOINT so a failed write leaves earlier work of the session
    intact; commit and rollback belong to the session owner.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def list_all_roles(
        self,
        merchant_id: str,
        org_id: str,
    ) -> Result[list[Role], DomainError]:
        """List custom roles visible to a merchant."""
        stmt = (
            select(RoleModel)
            .where(self._merchant_scope(merchant_id, org_id))
            .order_by(RoleModel.created_at)
        )
        try:
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        except SQLAlchemyError as e:
            return Failure(
                error=database_error_from(
                    e,
                    "Failed to list roles",
                    merchant_id=merchant_id,
                    org_id=org_id,
                )
            )
        return Success(value=[self._to_entity(m) for m in models])

    async def find_by_role_name(
        self,
        role_name: str,
        merchant_id: str,
        org_id: str,
    ) -> Result[Role | None, DomainError]:
        """Find a role by exact name within a merchant scope.

        Uses idx_roles_scope_name; comparison is case-sensitive.
        """
        stmt = (
            select(RoleModel)
            .where(RoleModel.role_name == role_name)
            .where(self._merchant_scope(merchant_id, org_id))
            .limit(1)
        )
        return await self._find_one(
            stmt,
            "Failed to find role by name",
            role_name=role_name,
            merchant_id=merchant_id,
            org_id=org_id,
        )

    async def find_by_role_id_in_merchant_scope(
        self,
        role_id: str,
        merchant_id: str,
        org_id: str,
    ) -> Result[Role | None, DomainError]:
        """Find a role visible to a merchant."""
        stmt = (
            select(RoleModel)
            .where(RoleModel.role_id == role_id)
            .where(self._merchant_scope(merchant_id, org_id))
        )
        return await self._find_one(
            stmt,
            "Failed to find role in merchant scope",
            role_id=role_id,
            merchant_id=merchant_id,
            org_id=org_id,
        )

    async def find_by_role_id_in_org_scope(
        self,
        role_id: str,
        org_id: str,
    ) -> Result[Role | None, DomainError]:
        """Find a role anywhere within an organization."""
        stmt = (
            select(RoleModel)
            .where(RoleModel.role_id == role_id)
            .where(RoleModel.org_id == org_id)
        )
        return await self._find_one(
            stmt,
            "Failed to find role in organization scope",
            role_id=role_id,
            org_id=org_id,
        )

    async def insert_role(self, role: Role) -> Result[Role, DomainError]:
        """Persist a new custom role."""
        try:
            async with self._session.begin_nested():
                self._session.add(self._to_model(role))
                await self._session.flush()
        except SQLAlchemyError as e:
            return Failure(
                error=database_error_from(
                    e,
                    "Failed to insert role",
                    role_id=role.role_id,
                )
            )
        return Success(value=role)

    async def update_role(self, role: Role) -> Result[Role, DomainError]:
        """Persist name and group changes of an existing role."""
        stmt = select(RoleModel).where(RoleModel.role_id == role.role_id)
        try:
            async with self._session.begin_nested():
                result = await self._session.execute(stmt)
                existing = result.scalar_one()
                existing.role_name = role.role_name
                existing.groups = [group.value for group in role.groups]
                existing.last_modified_by = role.last_modified_by
                existing.updated_at = role.last_modified_at
                await self._session.flush()
        except SQLAlchemyError as e:
            return Failure(
                error=database_error_from(
                    e,
                    "Failed to update role",
                    role_id=role.role_id,
                )
            )
        return Success(value=role)

    async def _find_one(
        self,
        stmt,
        message: str,
        **details: str,
    ) -> Result[Role | None, DomainError]:
        try:
            result = await self._session.execute(stmt)
            model = result.scalars().first()
        except SQLAlchemyError as e:
            return Failure(error=database_error_from(e, message, **details))
        if model is None:
            return Success(value=None)
        return Success(value=self._to_entity(model))

    @staticmethod
    def _merchant_scope(merchant_id: str, org_id: str) -> ColumnElement[bool]:
        return and_(
            RoleModel.org_id == org_id,
            or_(
                RoleModel.merchant_id == merchant_id,
                RoleModel.scope == RoleScope.ORGANIZATION.value,
            ),
        )

    def _to_entity(self, model: RoleModel) -> Role:
        """Map database model to domain entity."""
        return Role(
            role_id=model.role_id,
            role_name=model.role_name,
            merchant_id=model.merchant_id,
            org_id=model.org_id,
            profile_id=model.profile_id,
            groups=[PermissionGroup(group) for group in model.groups],
            scope=RoleScope(model.scope),
            entity_type=EntityType(model.entity_type),
            created_by=model.created_by,
            last_modified_by=model.last_modified_by,
            created_at=model.created_at,
            last_modified_at=model.updated_at,
        )

    def _to_model(self, entity: Role) -> RoleModel:
        """Map domain entity to database model."""
        return RoleModel(
            role_id=entity.role_id,
            role_name=entity.role_name,
            merchant_id=entity.merchant_id,
            org_id=entity.org_id,
            profile_id=entity.profile_id,
            groups=[group.value for group in entity.groups],
            scope=entity.scope.value,
            entity_type=entity.entity_type.value,
            created_by=entity.created_by,
            last_modified_by=entity.last_modified_by,
            created_at=entity.created_at,
            updated_at=entity.last_modified_at,
        )
