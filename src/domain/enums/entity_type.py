"""Entity types a role or user-role assignment is scoped to."""

from enum import Enum


class EntityType(str, Enum):
    """Scope level a role applies at.

    ORGANIZATION roles span every merchant under an organization; the
    other types are bound to a single merchant (PROFILE narrows further to
    one business profile).
    """

    ORGANIZATION = "organization"
    MERCHANT = "merchant"
    INTERNAL = "internal"
    PROFILE = "profile"

    @classmethod
    def values(cls) -> list[str]:
        """Get all entity type values as strings.

        Returns:
            list[str]: List of entity type values.
        """
        return [entity.value for entity in cls]
