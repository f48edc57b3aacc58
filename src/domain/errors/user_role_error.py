"""Role and permission error types.

Returned (never raised) by role validation, role resolution, permission
caching and merchant resolution.

Error kinds:
    - INVALID_ROLE_OPERATION: bad role-group composition or forbidden mutation
    - ROLE_NAME_ALREADY_EXISTS: name clashes with a predefined or in-scope role
    - ROLE_NAME_PARSING_ERROR: name is empty or too long
    - ROLE_NOT_FOUND: neither the predefined table nor the store has the role
    - INTERNAL_SERVER_ERROR: wraps store, cache and configuration failures

Usage:
    from src.domain.errors import UserRoleError
    from src.core.result import Failure

    return Failure(
        error=UserRoleError.internal_server_error(
            "Failed to list roles",
            cause=db_error,
        )
    )
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class UserRoleError(DomainError):
    """Role subsystem failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message safe to show the caller.
        details: Additional context.
        cause: Underlying store/cache error, kept for diagnostics only.
    """

    cause: DomainError | None = None

    @classmethod
    def invalid_role_operation(cls, message: str) -> "UserRoleError":
        """Build an INVALID_ROLE_OPERATION error."""
        return cls(code=ErrorCode.INVALID_ROLE_OPERATION, message=message)

    @classmethod
    def role_name_already_exists(cls, role_name: str) -> "UserRoleError":
        """Build a ROLE_NAME_ALREADY_EXISTS error."""
        return cls(
            code=ErrorCode.ROLE_NAME_ALREADY_EXISTS,
            message="Role name already exists",
            details={"role_name": role_name},
        )

    @classmethod
    def role_not_found(cls, role_id: str) -> "UserRoleError":
        """Build a ROLE_NOT_FOUND error."""
        return cls(
            code=ErrorCode.ROLE_NOT_FOUND,
            message="Role not found",
            details={"role_id": role_id},
        )

    @classmethod
    def internal_server_error(
        cls,
        message: str,
        *,
        cause: DomainError | None = None,
    ) -> "UserRoleError":
        """Build an INTERNAL_SERVER_ERROR error.

        Args:
            message: Diagnostic description of what failed.
            cause: Underlying error, if any.

        Returns:
            UserRoleError: Error with the cause attached.
        """
        return cls(
            code=ErrorCode.INTERNAL_SERVER_ERROR,
            message=message,
            cause=cause,
        )

    @classmethod
    def role_name_parsing_error(cls, message: str) -> "UserRoleError":
        """Build a ROLE_NAME_PARSING_ERROR error."""
        return cls(code=ErrorCode.ROLE_NAME_PARSING_ERROR, message=message)
