"""User-role assignment entity and its update variants.

A UserRole row binds a user to a role within a lineage
(org -> merchant -> profile). During the schema migration the same logical
assignment exists once per UserRoleVersion.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from src.domain.enums import EntityType, UserRoleVersion, UserStatus


@dataclass
class UserRole:
    """Assignment of a role to a user.

    Attributes:
        user_id: Assigned user.
        role_id: Assigned role (predefined or custom).
        merchant_id: Merchant lineage component (None for org-level V2 rows).
        org_id: Organization lineage component.
        profile_id: Profile lineage component.
        entity_type: Scope level of the assignment (None on legacy V1 rows).
        status: Assignment status.
        version: Schema version of the row.
        created_by: User who created the assignment.
        last_modified_by: User who last changed the assignment.
        created_at: Creation timestamp.
        last_modified: Last modification timestamp.
    """

    user_id: str
    role_id: str
    status: UserStatus
    version: UserRoleVersion
    created_by: str
    last_modified_by: str
    merchant_id: str | None = None
    org_id: str | None = None
    profile_id: str | None = None
    entity_type: EntityType | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    last_modified: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True, kw_only=True)
class UpdateStatus:
    """Change the status of an assignment."""

    status: UserStatus
    modified_by: str


@dataclass(frozen=True, kw_only=True)
class UpdateRole:
    """Reassign the user to a different role."""

    role_id: str
    modified_by: str


type UserRoleUpdate = UpdateStatus | UpdateRole
