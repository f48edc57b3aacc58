"""Runtime environments.

Used by Settings and the composition root to pick environment-specific
behavior (log renderer, connection pool sizing).
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
