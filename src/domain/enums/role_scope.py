"""Visibility scope of a role definition."""

from enum import Enum


class RoleScope(str, Enum):
    """Where a role definition can be assigned.

    ORGANIZATION: assignable across every merchant of the organization.
    MERCHANT: assignable only within the merchant that created it.
    """

    ORGANIZATION = "organization"
    MERCHANT = "merchant"
