"""Role management commands (CQRS write operations).

Commands represent intent to change roles or role assignments.
All commands are immutable (frozen=True) and use keyword-only arguments.

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
"""

from dataclasses import dataclass

from src.domain.enums import EntityType, PermissionGroup, RoleScope


@dataclass(frozen=True, kw_only=True)
class CreateRole:
    """Create a custom role.

    Attributes:
        role_name: Requested name (trimmed, case preserved).
        groups: Permission groups granted by the role.
        scope: Where the role can be assigned.
        entity_type: Entity type of the creating user; becomes the
            role's entity type. Organization scope requires ORGANIZATION.
        merchant_id: Merchant the creator acts for.
        org_id: Organization of that merchant.
        created_by: Creating user.

    Example:
        >>> command = CreateRole(
        ...     role_name="refund_desk",
        ...     groups=[PermissionGroup.OPERATIONS_VIEW],
        ...     scope=RoleScope.MERCHANT,
        ...     entity_type=EntityType.MERCHANT,
        ...     merchant_id="merchant_123",
        ...     org_id="org_456",
        ...     created_by="user_789",
        ... )
        >>> result = await handler.handle(command)
    """

    role_name: str
    groups: list[PermissionGroup]
    scope: RoleScope
    entity_type: EntityType
    merchant_id: str
    org_id: str
    created_by: str


@dataclass(frozen=True, kw_only=True)
class UpdateRole:
    """Rename a custom role and/or replace its groups.

    At least one of role_name and groups must be given. Predefined roles
    cannot be updated.

    Attributes:
        role_id: Role to update.
        merchant_id: Merchant the caller acts for.
        org_id: Organization of that merchant.
        updated_by: Updating user.
        role_name: New name, or None to keep the current one.
        groups: New groups, or None to keep the current ones.
    """

    role_id: str
    merchant_id: str
    org_id: str
    updated_by: str
    role_name: str | None = None
    groups: list[PermissionGroup] | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateUserRole:
    """Assign a different role to a user.

    Applied to both user-role schema versions.

    Attributes:
        user_id: User whose assignment changes.
        org_id: Organization lineage component.
        merchant_id: Merchant lineage component.
        profile_id: Profile lineage component.
        role_id: Role to assign.
        updated_by: Updating user.
    """

    user_id: str
    org_id: str
    merchant_id: str
    role_id: str
    updated_by: str
    profile_id: str | None = None
