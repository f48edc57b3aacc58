"""Domain errors package.

Usage:
    from src.domain.errors import UserRoleError
"""

from src.domain.errors.user_role_error import UserRoleError

__all__ = ["UserRoleError"]
