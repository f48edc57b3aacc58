"""Unit tests for the composition root.

Tests cover:
- Singleton factories honor settings
- Session-scoped factories wire repositories around one session
- After-commit scheduling is bound to the unit-of-work session
"""

import os
from unittest.mock import AsyncMock, patch

import pytest

from src.application.commands.handlers.update_role_handler import UpdateRoleHandler
from src.application.services import RolePermissionCacheService
from src.core.config import get_settings
from src.core.container import (
    get_after_commit,
    get_cache_keys,
    get_logger,
    get_role_permission_cache_service,
    get_role_repository,
    get_update_role_handler,
)
from src.infrastructure.logging.console_adapter import ConsoleAdapter
from src.infrastructure.persistence.repositories import RoleRepository


@pytest.fixture(autouse=True)
def isolated_settings():
    env_values = {"ENVIRONMENT": "testing", "CACHE_KEY_PREFIX": "unit"}
    with patch.dict(os.environ, env_values, clear=True):
        get_settings.cache_clear()
        get_cache_keys.cache_clear()
        get_logger.cache_clear()
        yield
    get_settings.cache_clear()
    get_cache_keys.cache_clear()
    get_logger.cache_clear()


@pytest.mark.unit
class TestInfrastructureFactories:
    """Test app-scoped singletons."""

    def test_cache_keys_use_configured_prefix(self):
        assert get_cache_keys().role_permissions("r") == "unit:role:r:permissions"

    def test_logger_is_singleton_console_adapter(self):
        logger = get_logger()

        assert isinstance(logger, ConsoleAdapter)
        assert get_logger() is logger


@pytest.mark.unit
class TestSessionScopedFactories:
    """Test session-scoped wiring."""

    def test_repository_bound_to_session(self):
        session = AsyncMock()

        repo = get_role_repository(session)

        assert isinstance(repo, RoleRepository)
        assert repo._session is session

    def test_cache_service_uses_token_lifetime_ttl(self):
        with patch("src.core.container.services.get_role_permission_cache"):
            service = get_role_permission_cache_service(AsyncMock())

        assert isinstance(service, RolePermissionCacheService)
        assert service._ttl_seconds == get_settings().jwt_token_time_in_secs

    def test_update_role_handler_is_wired(self):
        with patch("src.core.container.services.get_role_permission_cache"):
            handler = get_update_role_handler(AsyncMock())

        assert isinstance(handler, UpdateRoleHandler)

    def test_after_commit_registers_on_session(self):
        session = AsyncMock()
        session.info = {}
        callback = AsyncMock()

        get_after_commit(session)(callback)

        assert session.info["after_commit"] == [callback]
