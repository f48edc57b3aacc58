"""Predefined role table."""

from src.domain.roles.predefined_roles import (
    PREDEFINED_ROLES,
    ROLE_ID_INTERNAL_ADMIN,
    ROLE_ID_INTERNAL_VIEW_ONLY,
    ROLE_ID_MERCHANT_ADMIN,
    ROLE_ID_MERCHANT_CUSTOMER_SUPPORT,
    ROLE_ID_MERCHANT_DEVELOPER,
    ROLE_ID_MERCHANT_IAM_ADMIN,
    ROLE_ID_MERCHANT_OPERATOR,
    ROLE_ID_MERCHANT_VIEW_ONLY,
    ROLE_ID_ORGANIZATION_ADMIN,
    get_predefined_role,
    is_predefined_role,
    is_predefined_role_name,
)

__all__ = [
    "PREDEFINED_ROLES",
    "ROLE_ID_INTERNAL_ADMIN",
    "ROLE_ID_INTERNAL_VIEW_ONLY",
    "ROLE_ID_MERCHANT_ADMIN",
    "ROLE_ID_MERCHANT_CUSTOMER_SUPPORT",
    "ROLE_ID_MERCHANT_DEVELOPER",
    "ROLE_ID_MERCHANT_IAM_ADMIN",
    "ROLE_ID_MERCHANT_OPERATOR",
    "ROLE_ID_MERCHANT_VIEW_ONLY",
    "ROLE_ID_ORGANIZATION_ADMIN",
    "get_predefined_role",
    "is_predefined_role",
    "is_predefined_role_name",
]
