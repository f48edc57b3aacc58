"""RoleName value object with validation.

Immutable value object that validates role names.
"""

from dataclasses import dataclass

from src.core.constants import MAX_ROLE_NAME_LENGTH


@dataclass(frozen=True)
class RoleName:
    """Role name value object.

    Surrounding whitespace is stripped; case is preserved, so uniqueness
    checks stay case-sensitive.

    Attributes:
        value: The validated role name.

    Raises:
        ValueError: If the name is empty or longer than MAX_ROLE_NAME_LENGTH.

    Example:
        >>> RoleName("  support_lead ").value
        'support_lead'
        >>> RoleName("   ")
        Traceback (most recent call last):
        ...
        ValueError: Role name cannot be empty
    """

    value: str

    def __post_init__(self) -> None:
        """Normalize and validate the role name.

        Raises:
            ValueError: If the name is empty or too long.
        """
        normalized = self.value.strip()
        if not normalized:
            raise ValueError("Role name cannot be empty")
        if len(normalized) > MAX_ROLE_NAME_LENGTH:
            raise ValueError(
                f"Role name cannot exceed {MAX_ROLE_NAME_LENGTH} characters"
            )
        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "value", normalized)

    def get_role_name(self) -> str:
        """Return the role name as a plain string."""
        return self.value

    def __str__(self) -> str:
        return self.value
