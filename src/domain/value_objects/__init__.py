"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from src.domain.value_objects.role_info import RoleInfo
from src.domain.value_objects.role_name import RoleName

__all__ = [
    "RoleInfo",
    "RoleName",
]
