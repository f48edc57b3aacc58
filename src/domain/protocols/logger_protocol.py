"""LoggerProtocol definition for structured logging.

Standardizes structured logging across the subsystem while remaining
backend-agnostic. Implementations MUST emit structured (key-value) logs.

Log Levels:
    - DEBUG: Cache hits/misses, resolution paths
    - INFO: Role mutations, cache population
    - WARNING: Degraded behavior (cache unavailable, fallback to store)
    - ERROR: Failed store writes, failed cache population
    - CRITICAL: Unrecoverable failures

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("role_created", role_id=role.role_id, merchant_id=merchant_id)

    role_logger = logger.bind(role_id=role_id)
    role_logger.warning("permission_cache_unavailable")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: message + key-value context.
    Never log secrets or tokens.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name or short description (avoid f-strings).
            error: Optional exception instance; implementation adds
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
