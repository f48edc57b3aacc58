"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Example:
    >>> from src.core.constants import MAX_ROLE_NAME_LENGTH
    >>> len(name) <= MAX_ROLE_NAME_LENGTH
"""

# =============================================================================
# Token lifetime
# =============================================================================

JWT_TOKEN_TIME_IN_SECS: int = 60 * 60 * 24 * 2
"""Default authentication token lifetime (2 days). Cached permissions use it as TTL."""


# =============================================================================
# Roles
# =============================================================================

MAX_ROLE_NAME_LENGTH: int = 64
"""Maximum number of characters in a role name."""

ROLE_ID_PREFIX: str = "role_"
"""Prefix of generated custom role identifiers."""


# =============================================================================
# Cache keys
# =============================================================================

DEFAULT_CACHE_KEY_PREFIX: str = "authz"
"""Default prefix for cache keys written by this subsystem."""
