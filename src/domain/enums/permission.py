"""Permission catalog for RBAC authorization.

Defines the closed set of fine-grained permissions a role can grant.
Permissions are never assigned directly: roles carry PermissionGroups,
which expand to the permissions defined here.

Usage:
    from src.domain.enums import Permission, PermissionGroup

    if Permission.REFUND_WRITE in role_info.get_permissions_set():
        ...
"""

from enum import Enum


class Permission(str, Enum):
    """Fine-grained capabilities checked by the authorization layer.

    String Enum:
        Inherits from str for easy serialization (cache values, API payloads).
        Values are snake_case.
    """

    PAYMENT_READ = "payment_read"
    PAYMENT_WRITE = "payment_write"
    REFUND_READ = "refund_read"
    REFUND_WRITE = "refund_write"
    API_KEY_READ = "api_key_read"
    API_KEY_WRITE = "api_key_write"
    MERCHANT_ACCOUNT_READ = "merchant_account_read"
    MERCHANT_ACCOUNT_WRITE = "merchant_account_write"
    MERCHANT_CONNECTOR_ACCOUNT_READ = "merchant_connector_account_read"
    MERCHANT_CONNECTOR_ACCOUNT_WRITE = "merchant_connector_account_write"
    ROUTING_READ = "routing_read"
    ROUTING_WRITE = "routing_write"
    DISPUTE_READ = "dispute_read"
    DISPUTE_WRITE = "dispute_write"
    MANDATE_READ = "mandate_read"
    MANDATE_WRITE = "mandate_write"
    CUSTOMER_READ = "customer_read"
    CUSTOMER_WRITE = "customer_write"
    ANALYTICS = "analytics"
    THREE_DS_DECISION_MANAGER_WRITE = "three_ds_decision_manager_write"
    THREE_DS_DECISION_MANAGER_READ = "three_ds_decision_manager_read"
    SURCHARGE_DECISION_MANAGER_WRITE = "surcharge_decision_manager_write"
    SURCHARGE_DECISION_MANAGER_READ = "surcharge_decision_manager_read"
    USERS_READ = "users_read"
    USERS_WRITE = "users_write"
    MERCHANT_ACCOUNT_CREATE = "merchant_account_create"
    WEBHOOK_EVENT_READ = "webhook_event_read"
    WEBHOOK_EVENT_WRITE = "webhook_event_write"
    PAYOUT_READ = "payout_read"
    PAYOUT_WRITE = "payout_write"
    GENERATE_REPORT = "generate_report"

    @classmethod
    def values(cls) -> list[str]:
        """Get all permission values as strings.

        Returns:
            list[str]: List of permission values.
        """
        return [permission.value for permission in cls]
