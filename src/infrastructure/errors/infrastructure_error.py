"""Infrastructure layer error types.

Infrastructure errors represent failures in external systems (store, cache).

Architecture:
- Infrastructure catches library exceptions and maps them to these errors
- Infrastructure errors inherit from DomainError (not Exception)
- InfrastructureErrorCode is kept for internal tracking
- Used with Result types for error propagation
"""

from dataclasses import dataclass
from typing import Any

from src.core.errors import DomainError
from src.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        infrastructure_code: Original infrastructure error code.
        details: Additional context.
    """

    infrastructure_code: InfrastructureErrorCode | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class DatabaseError(InfrastructureError):
    """Store failure.

    Wraps SQLAlchemy exceptions and missing-row conditions.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Cache failure.

    Wraps Redis exceptions and undecodable cache values.
    """

    pass
