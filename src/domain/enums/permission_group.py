"""Permission groups bundling fine-grained permissions.

Roles are defined as lists of PermissionGroup. The bundle for each group
is fixed at build time (see _GROUP_PERMISSIONS).

Reserved Group:
    ORGANIZATION_MANAGE can never be added to a role directly; it is
    granted only through the predefined organization admin role.
"""

from enum import Enum
from types import MappingProxyType

from src.domain.enums.permission import Permission


class PermissionGroup(str, Enum):
    """Named bundles of permissions assignable to roles.

    String Enum:
        Inherits from str for easy serialization (store rows, API payloads).
    """

    OPERATIONS_VIEW = "operations_view"
    """Read payments, refunds, mandates, disputes, customers and payouts."""

    OPERATIONS_MANAGE = "operations_manage"
    """Create and modify operational resources."""

    CONNECTORS_VIEW = "connectors_view"
    CONNECTORS_MANAGE = "connectors_manage"
    WORKFLOWS_VIEW = "workflows_view"
    WORKFLOWS_MANAGE = "workflows_manage"
    ANALYTICS_VIEW = "analytics_view"
    USERS_VIEW = "users_view"
    USERS_MANAGE = "users_manage"
    MERCHANT_DETAILS_VIEW = "merchant_details_view"
    MERCHANT_DETAILS_MANAGE = "merchant_details_manage"

    ORGANIZATION_MANAGE = "organization_manage"
    """Reserved. Cannot be assigned to a custom role."""

    RECON_OPS = "recon_ops"

    def get_permissions(self) -> frozenset[Permission]:
        """Get the permissions bundled by this group.

        Returns:
            frozenset[Permission]: Permissions granted by the group.
        """
        return _GROUP_PERMISSIONS[self]

    @classmethod
    def values(cls) -> list[str]:
        """Get all group values as strings.

        Returns:
            list[str]: List of group values.
        """
        return [group.value for group in cls]


_GROUP_PERMISSIONS: MappingProxyType[PermissionGroup, frozenset[Permission]] = (
    MappingProxyType(
        {
            PermissionGroup.OPERATIONS_VIEW: frozenset(
                {
                    Permission.PAYMENT_READ,
                    Permission.REFUND_READ,
                    Permission.MANDATE_READ,
                    Permission.DISPUTE_READ,
                    Permission.CUSTOMER_READ,
                    Permission.GENERATE_REPORT,
                    Permission.PAYOUT_READ,
                    Permission.MERCHANT_ACCOUNT_READ,
                }
            ),
            PermissionGroup.OPERATIONS_MANAGE: frozenset(
                {
                    Permission.PAYMENT_WRITE,
                    Permission.REFUND_WRITE,
                    Permission.MANDATE_WRITE,
                    Permission.DISPUTE_WRITE,
                    Permission.CUSTOMER_WRITE,
                    Permission.PAYOUT_WRITE,
                    Permission.MERCHANT_ACCOUNT_READ,
                }
            ),
            PermissionGroup.CONNECTORS_VIEW: frozenset(
                {
                    Permission.MERCHANT_CONNECTOR_ACCOUNT_READ,
                    Permission.MERCHANT_ACCOUNT_READ,
                }
            ),
            PermissionGroup.CONNECTORS_MANAGE: frozenset(
                {
                    Permission.MERCHANT_CONNECTOR_ACCOUNT_WRITE,
                    Permission.MERCHANT_ACCOUNT_READ,
                }
            ),
            PermissionGroup.WORKFLOWS_VIEW: frozenset(
                {
                    Permission.ROUTING_READ,
                    Permission.THREE_DS_DECISION_MANAGER_READ,
                    Permission.SURCHARGE_DECISION_MANAGER_READ,
                    Permission.MERCHANT_CONNECTOR_ACCOUNT_READ,
                    Permission.MERCHANT_ACCOUNT_READ,
                    Permission.PAYOUT_READ,
                }
            ),
            PermissionGroup.WORKFLOWS_MANAGE: frozenset(
                {
                    Permission.ROUTING_WRITE,
                    Permission.THREE_DS_DECISION_MANAGER_WRITE,
                    Permission.SURCHARGE_DECISION_MANAGER_WRITE,
                    Permission.MERCHANT_CONNECTOR_ACCOUNT_READ,
                    Permission.MERCHANT_ACCOUNT_READ,
                    Permission.PAYOUT_WRITE,
                }
            ),
            PermissionGroup.ANALYTICS_VIEW: frozenset(
                {
                    Permission.ANALYTICS,
                    Permission.GENERATE_REPORT,
                    Permission.PAYMENT_READ,
                    Permission.REFUND_READ,
                    Permission.DISPUTE_READ,
                    Permission.MERCHANT_ACCOUNT_READ,
                }
            ),
            PermissionGroup.USERS_VIEW: frozenset(
                {Permission.USERS_READ, Permission.MERCHANT_ACCOUNT_READ}
            ),
            PermissionGroup.USERS_MANAGE: frozenset(
                {Permission.USERS_WRITE, Permission.MERCHANT_ACCOUNT_READ}
            ),
            PermissionGroup.MERCHANT_DETAILS_VIEW: frozenset(
                {
                    Permission.MERCHANT_ACCOUNT_READ,
                    Permission.API_KEY_READ,
                    Permission.WEBHOOK_EVENT_READ,
                }
            ),
            PermissionGroup.MERCHANT_DETAILS_MANAGE: frozenset(
                {
                    Permission.MERCHANT_ACCOUNT_WRITE,
                    Permission.API_KEY_WRITE,
                    Permission.WEBHOOK_EVENT_WRITE,
                    Permission.MERCHANT_ACCOUNT_READ,
                }
            ),
            PermissionGroup.ORGANIZATION_MANAGE: frozenset(
                {Permission.MERCHANT_ACCOUNT_CREATE, Permission.MERCHANT_ACCOUNT_READ}
            ),
            PermissionGroup.RECON_OPS: frozenset(
                {Permission.GENERATE_REPORT, Permission.MERCHANT_ACCOUNT_READ}
            ),
        }
    )
)


def get_permissions_for_groups(
    groups: "list[PermissionGroup] | tuple[PermissionGroup, ...]",
) -> frozenset[Permission]:
    """Expand groups into the union of their permissions.

    Args:
        groups: Permission groups to expand.

    Returns:
        frozenset[Permission]: Every permission granted by any group.
    """
    permissions: set[Permission] = set()
    for group in groups:
        permissions |= group.get_permissions()
    return frozenset(permissions)
