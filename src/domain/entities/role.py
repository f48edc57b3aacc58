"""Custom role domain entity.

A custom role is defined by a merchant or organization and stored in the
persistent store. Predefined roles are not entities; they live in the
compiled-in table (see src/domain/roles/predefined_roles.py).
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from src.domain.enums import EntityType, PermissionGroup, RoleScope


@dataclass
class Role:
    """Custom (merchant- or organization-defined) role.

    Business Rules:
        - role_name is unique within (merchant_id, org_id), including the
          names of predefined roles
        - groups is non-empty, duplicate-free and never contains
          PermissionGroup.ORGANIZATION_MANAGE

    Attributes:
        role_id: Unique role identifier ("role_<hex>").
        role_name: Human-readable name.
        merchant_id: Merchant that created the role.
        org_id: Organization the merchant belongs to.
        groups: Permission groups granted by the role.
        scope: Where the role can be assigned.
        entity_type: Scope level of users holding the role.
        profile_id: Optional business profile the role is bound to.
        created_by: User who created the role.
        last_modified_by: User who last changed the role.
        created_at: Creation timestamp.
        last_modified_at: Last modification timestamp.
    """

    role_id: str
    role_name: str
    merchant_id: str
    org_id: str
    groups: list[PermissionGroup]
    scope: RoleScope
    entity_type: EntityType
    created_by: str
    last_modified_by: str
    profile_id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    last_modified_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def rename(self, role_name: str, *, modified_by: str) -> None:
        """Change the role name and stamp the modification."""
        self.role_name = role_name
        self._touch(modified_by)

    def replace_groups(
        self,
        groups: list[PermissionGroup],
        *,
        modified_by: str,
    ) -> None:
        """Replace the permission groups and stamp the modification."""
        self.groups = list(groups)
        self._touch(modified_by)

    def _touch(self, modified_by: str) -> None:
        self.last_modified_by = modified_by
        self.last_modified_at = datetime.now(UTC)
