"""Commands - Write operations that change roles and role assignments.

Commands are immutable dataclasses with imperative names. Each command has
a handler in commands/handlers/ that executes it and returns a Result.
"""

from src.application.commands.role_commands import (
    CreateRole,
    UpdateRole,
    UpdateUserRole,
)

__all__ = [
    "CreateRole",
    "UpdateRole",
    "UpdateUserRole",
]
