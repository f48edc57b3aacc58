"""Persistence infrastructure for the role store.

- base.py: declarative base and timestamp mixin
- database.py: engine and session management
- models/: table mappings
- repositories/: Result-returning repository implementations
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database, register_after_commit

__all__ = [
    "BaseModel",
    "Database",
    "register_after_commit",
]
