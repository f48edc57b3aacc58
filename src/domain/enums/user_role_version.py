"""Storage schema versions for user-role assignments.

Two persisted representations coexist during the schema migration.
Every assignment mutation is applied to both.
"""

from enum import Enum


class UserRoleVersion(str, Enum):
    """Schema version tag of a user_roles row."""

    V1 = "v1"
    V2 = "v2"

    @classmethod
    def values(cls) -> list[str]:
        """Get all version values as strings.

        Returns:
            list[str]: ['v1', 'v2'].
        """
        return [version.value for version in cls]
