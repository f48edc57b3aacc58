"""SQLAlchemy exception to DatabaseError mapping.

Repositories catch SQLAlchemyError at their boundary and return the mapped
error inside a Failure, so no database exception crosses into the
application layer.
"""

from typing import Any

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from src.core.enums import ErrorCode
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import DatabaseError


def database_error_from(
    error: SQLAlchemyError,
    message: str,
    **details: Any,
) -> DatabaseError:
    """Map a SQLAlchemy exception to a DatabaseError.

    Args:
        error: Exception raised by SQLAlchemy.
        message: What the repository was doing.
        **details: Identifiers of the affected rows.

    Returns:
        DatabaseError with an infrastructure code matching the exception type.
    """
    if isinstance(error, IntegrityError):
        infrastructure_code = InfrastructureErrorCode.DATABASE_CONSTRAINT_VIOLATION
    elif isinstance(error, OperationalError):
        infrastructure_code = InfrastructureErrorCode.DATABASE_CONNECTION_FAILED
    else:
        infrastructure_code = InfrastructureErrorCode.DATABASE_ERROR

    return DatabaseError(
        code=ErrorCode.INTERNAL_SERVER_ERROR,
        infrastructure_code=infrastructure_code,
        message=message,
        details={
            **details,
            "error_type": type(error).__name__,
            "error": str(error),
        },
    )


def record_not_found(code: ErrorCode, message: str, **details: Any) -> DatabaseError:
    """Build the DatabaseError returned when an update targets a missing row."""
    return DatabaseError(
        code=code,
        infrastructure_code=InfrastructureErrorCode.DATABASE_RECORD_NOT_FOUND,
        message=message,
        details=details,
    )
