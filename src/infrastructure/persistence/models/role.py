"""Custom role database model.

Stores merchant- and organization-defined roles. Predefined roles are not
stored; they live in the compiled-in table.
"""

from sqlalchemy import JSON, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class RoleModel(BaseModel):
    """Custom role row.

    Fields:
        id: UUID surrogate key (from BaseModel)
        role_id: Business identifier ("role_<hex>"), unique
        role_name: Human-readable name
        merchant_id: Creating merchant
        org_id: Organization of the creating merchant
        profile_id: Optional profile binding
        groups: JSON list of permission group values
        scope: "organization" or "merchant"
        entity_type: Entity type of holders
        created_by / last_modified_by: Audit columns

    Indexes:
        - idx_roles_scope_name: (org_id, merchant_id, role_name) for name lookups
        - idx_roles_org_scope: (org_id, scope) for org-scoped resolution
    """

    __tablename__ = "roles"

    role_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
    )
    role_name: Mapped[str] = mapped_column(String(64), nullable=False)
    merchant_id: Mapped[str] = mapped_column(String(64), nullable=False)
    org_id: Mapped[str] = mapped_column(String(64), nullable=False)
    profile_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    groups: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    scope: Mapped[str] = mapped_column(String(20), nullable=False)
    entity_type: Mapped[str] = mapped_column(String(20), nullable=False)
    created_by: Mapped[str] = mapped_column(String(64), nullable=False)
    last_modified_by: Mapped[str] = mapped_column(String(64), nullable=False)

    __table_args__ = (
        Index("idx_roles_scope_name", "org_id", "merchant_id", "role_name"),
        Index("idx_roles_org_scope", "org_id", "scope"),
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<RoleModel(role_id={self.role_id}, role_name={self.role_name})>"
