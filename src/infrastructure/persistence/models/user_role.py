"""User-role assignment database model.

Each logical assignment is stored once per schema version while both
versions coexist.
"""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class UserRoleModel(BaseModel):
    """User-role assignment row.

    Fields:
        user_id: Assigned user
        role_id: Assigned role (predefined or custom)
        org_id / merchant_id / profile_id: Lineage of the assignment
        entity_type: Scope level (NULL on legacy v1 rows)
        status: "active" or "invitation_sent"
        version: "v1" or "v2"
        created_by / last_modified_by: Audit columns
        updated_at: Last modification (from BaseModel)

    Indexes:
        - idx_user_roles_lineage: (user_id, org_id, merchant_id, profile_id, version)
    """

    __tablename__ = "user_roles"

    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    role_id: Mapped[str] = mapped_column(String(64), nullable=False)
    org_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    merchant_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    profile_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    entity_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    version: Mapped[str] = mapped_column(String(4), nullable=False)
    created_by: Mapped[str] = mapped_column(String(64), nullable=False)
    last_modified_by: Mapped[str] = mapped_column(String(64), nullable=False)

    __table_args__ = (
        Index(
            "idx_user_roles_lineage",
            "user_id",
            "org_id",
            "merchant_id",
            "profile_id",
            "version",
        ),
    )
