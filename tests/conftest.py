"""Pytest configuration and shared test helpers.

Async tests run under pytest-asyncio (asyncio_mode = "auto" in
pyproject.toml). Unit tests replace ports with AsyncMock(spec=Protocol)
fakes. Integration tests (tests/integration/) use a real PostgreSQL
database from DATABASE_URL.
"""

import asyncio

import pytest

from src.domain.entities.role import Role
from src.domain.entities.user_role import UserRole
from src.domain.enums import (
    EntityType,
    PermissionGroup,
    RoleScope,
    UserRoleVersion,
    UserStatus,
)

MERCHANT_ID = "merchant_123"
ORG_ID = "org_456"
USER_ID = "user_789"


def create_role(
    role_id: str = "role_custom_1",
    role_name: str = "refund_desk",
    merchant_id: str = MERCHANT_ID,
    org_id: str = ORG_ID,
    groups: list[PermissionGroup] | None = None,
    scope: RoleScope = RoleScope.MERCHANT,
    entity_type: EntityType = EntityType.MERCHANT,
) -> Role:
    """Helper to create a custom Role for testing."""
    return Role(
        role_id=role_id,
        role_name=role_name,
        merchant_id=merchant_id,
        org_id=org_id,
        groups=groups
        if groups is not None
        else [PermissionGroup.OPERATIONS_VIEW, PermissionGroup.OPERATIONS_MANAGE],
        scope=scope,
        entity_type=entity_type,
        created_by=USER_ID,
        last_modified_by=USER_ID,
    )


def create_user_role(
    role_id: str = "role_custom_1",
    merchant_id: str | None = MERCHANT_ID,
    org_id: str | None = ORG_ID,
    entity_type: EntityType | None = EntityType.MERCHANT,
    version: UserRoleVersion = UserRoleVersion.V2,
) -> UserRole:
    """Helper to create a UserRole assignment for testing."""
    return UserRole(
        user_id=USER_ID,
        role_id=role_id,
        merchant_id=merchant_id,
        org_id=org_id,
        entity_type=entity_type,
        status=UserStatus.ACTIVE,
        version=version,
        created_by=USER_ID,
        last_modified_by=USER_ID,
    )


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if asyncio.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)
