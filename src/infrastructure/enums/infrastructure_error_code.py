"""Infrastructure-specific error codes.

Internal codes for tracking store and cache failures. They travel next to
the domain ErrorCode inside InfrastructureError.

Categories:
- Database errors (DATABASE_*)
- Cache errors (CACHE_*)
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes."""

    # Database errors
    DATABASE_CONNECTION_FAILED = "database_connection_failed"
    DATABASE_CONSTRAINT_VIOLATION = "database_constraint_violation"
    DATABASE_RECORD_NOT_FOUND = "database_record_not_found"
    DATABASE_ERROR = "database_error"

    # Cache errors
    CACHE_CONNECTION_ERROR = "cache_connection_error"
    CACHE_GET_ERROR = "cache_get_error"
    CACHE_SET_ERROR = "cache_set_error"
    CACHE_DELETE_ERROR = "cache_delete_error"
    CACHE_DECODE_ERROR = "cache_decode_error"
