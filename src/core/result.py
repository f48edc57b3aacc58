"""Result types for railway-oriented programming.

Operations that can fail return a Result instead of raising. Callers
pattern-match on the outcome, which keeps store and cache failures explicit
at every seam of the authorization subsystem.

Usage:
    def parse_version(raw: str) -> Result[UserRoleVersion, str]:
        if raw not in UserRoleVersion.values():
            return Failure(error=f"unknown version: {raw}")
        return Success(value=UserRoleVersion(raw))

    match await registry.resolve(role_id, merchant_id, org_id):
        case Success(value=role_info):
            permissions = role_info.get_permissions_set()
        case Failure(error=err):
            logger.warning("role_resolution_failed", error_code=err.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
