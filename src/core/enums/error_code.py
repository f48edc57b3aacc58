"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Role validation errors (INVALID_ROLE_*, ROLE_NAME_*)
- Resource errors (*_NOT_FOUND)
- Generic failures (INTERNAL_SERVER_ERROR)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_ROLE_OPERATION = "invalid_role_operation"
    ROLE_NAME_PARSING_ERROR = "role_name_parsing_error"

    # Conflict errors
    ROLE_NAME_ALREADY_EXISTS = "role_name_already_exists"

    # Resource errors
    ROLE_NOT_FOUND = "role_not_found"
    USER_ROLE_NOT_FOUND = "user_role_not_found"

    # Wraps store, cache and configuration failures
    INTERNAL_SERVER_ERROR = "internal_server_error"
