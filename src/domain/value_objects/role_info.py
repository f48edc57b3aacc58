"""RoleInfo value object.

The read-only projection of a role used for authorization decisions.
Predefined RoleInfo values are built once at import time; custom ones are
built on demand from store rows via RoleInfo.from_role().
"""

from dataclasses import dataclass

from src.domain.entities.role import Role
from src.domain.enums import (
    EntityType,
    Permission,
    PermissionGroup,
    RoleScope,
    get_permissions_for_groups,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class RoleInfo:
    """Resolved role used for authorization.

    Attributes:
        role_id: Role identifier.
        role_name: Human-readable name.
        groups: Permission groups granted by the role.
        scope: Where the role can be assigned.
        entity_type: Scope level of users holding the role.
        is_invitable: Users can be invited with this role.
        is_deletable: Role definition can be deleted.
        is_updatable: Role definition (or its assignments) can be changed.
        is_internal: Role is reserved for platform operators.
    """

    role_id: str
    role_name: str
    groups: tuple[PermissionGroup, ...]
    scope: RoleScope
    entity_type: EntityType
    is_invitable: bool = True
    is_deletable: bool = True
    is_updatable: bool = True
    is_internal: bool = False

    def get_role_name(self) -> str:
        """Return the human-readable role name."""
        return self.role_name

    def get_permissions_set(self) -> frozenset[Permission]:
        """Expand the role's groups into its full permission set.

        Returns:
            frozenset[Permission]: Every permission the role grants.
        """
        return get_permissions_for_groups(self.groups)

    def has_permission(self, permission: Permission) -> bool:
        """Check whether the role grants a permission."""
        return permission in self.get_permissions_set()

    @classmethod
    def from_role(cls, role: Role) -> "RoleInfo":
        """Build RoleInfo from a custom role row.

        Custom roles are always invitable, deletable and updatable, and
        never internal.

        Args:
            role: Custom role entity.

        Returns:
            RoleInfo: Read-only projection of the role.
        """
        return cls(
            role_id=role.role_id,
            role_name=role.role_name,
            groups=tuple(role.groups),
            scope=role.scope,
            entity_type=role.entity_type,
        )
