"""Integration tests for dual-version user-role updates on one session.

Tests cover:
- Both versions updated and committed
- A failing V2 write leaves the committed V1 write in place
- A failing V1 write does not block V2
- UpdateUserRoleHandler warms the cache only after commit, from committed rows
- Rolled-back units of work neither persist nor warm the cache

Architecture:
- Integration tests with REAL PostgreSQL database
- V1 and V2 share one session, as wired by the container
- Write failures are forced with a row-level trigger on the test user
"""

from functools import partial
from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio
from sqlalchemy import select, text

from src.application.commands.handlers.update_user_role_handler import (
    UpdateUserRoleHandler,
)
from src.application.commands.role_commands import UpdateUserRole
from src.application.services.role_permission_cache_service import (
    RolePermissionCacheService,
)
from src.application.services.role_registry import RoleRegistry
from src.application.services.user_role_update_service import (
    DualVersionOutcome,
    UserRoleUpdateService,
)
from src.core.result import Failure, Success
from src.domain.entities.user_role import UpdateRole
from src.domain.enums import UserRoleVersion
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.roles import ROLE_ID_MERCHANT_ADMIN
from src.infrastructure.persistence.database import register_after_commit
from src.infrastructure.persistence.models.user_role import UserRoleModel
from src.infrastructure.persistence.repositories.role_repository import (
    RoleRepository,
)
from src.infrastructure.persistence.repositories.user_role_repository import (
    UserRoleRepository,
)

OLD_ROLE_ID = "view_only"
NEW_ROLE = UpdateRole(role_id=ROLE_ID_MERCHANT_ADMIN, modified_by="user_editor")


@pytest_asyncio.fixture
async def assignments(test_database, user_id, merchant_id, org_id):
    """Store V1 and V2 rows of one assignment, both on OLD_ROLE_ID."""
    async with test_database.get_session() as session:
        for version in UserRoleVersion:
            session.add(
                UserRoleModel(
                    user_id=user_id,
                    role_id=OLD_ROLE_ID,
                    org_id=org_id,
                    merchant_id=merchant_id,
                    profile_id=None,
                    entity_type="merchant",
                    status="active",
                    version=version.value,
                    created_by="user_creator",
                    last_modified_by="user_creator",
                )
            )
    return user_id


@pytest_asyncio.fixture
async def lock_version(test_database, user_id):
    """Make updates of one version's row fail for the test user."""
    trigger_names = []

    async def lock(version: UserRoleVersion) -> None:
        name = f"lock_{version.value}_{user_id}"
        trigger_names.append(name)
        async with test_database.get_session() as session:
            await session.execute(
                text(
                    "CREATE OR REPLACE FUNCTION reject_user_role_update() "
                    "RETURNS trigger LANGUAGE plpgsql AS "
                    "$$ BEGIN RAISE EXCEPTION 'user role row is locked'; END; $$"
                )
            )
            await session.execute(
                text(
                    f"CREATE TRIGGER {name} BEFORE UPDATE ON user_roles "
                    f"FOR EACH ROW WHEN (OLD.version = '{version.value}' "
                    f"AND OLD.user_id = '{user_id}') "
                    "EXECUTE FUNCTION reject_user_role_update()"
                )
            )

    yield lock

    async with test_database.get_session() as session:
        for name in trigger_names:
            await session.execute(text(f"DROP TRIGGER IF EXISTS {name} ON user_roles"))


async def stored_role_ids(test_database, user_id) -> dict[str, str]:
    async with test_database.get_session() as session:
        result = await session.execute(
            select(UserRoleModel.version, UserRoleModel.role_id).where(
                UserRoleModel.user_id == user_id
            )
        )
        return dict(result.all())


async def update_both(test_database, user_id, merchant_id, org_id):
    async with test_database.get_session() as session:
        service = UserRoleUpdateService(
            user_role_repo=UserRoleRepository(session),
            logger=Mock(spec=LoggerProtocol),
        )
        return await service.update_v1_and_v2_user_roles(
            user_id, org_id, merchant_id, None, NEW_ROLE
        )


@pytest.mark.integration
class TestDualVersionUpdateIntegration:
    """Test update_v1_and_v2_user_roles against committed state."""

    async def test_both_versions_committed(
        self, test_database, assignments, merchant_id, org_id
    ):
        result = await update_both(test_database, assignments, merchant_id, org_id)

        assert result.outcome is DualVersionOutcome.BOTH_SUCCEEDED
        assert await stored_role_ids(test_database, assignments) == {
            "v1": ROLE_ID_MERCHANT_ADMIN,
            "v2": ROLE_ID_MERCHANT_ADMIN,
        }

    async def test_v2_failure_keeps_v1_write(
        self, test_database, assignments, lock_version, merchant_id, org_id
    ):
        await lock_version(UserRoleVersion.V2)

        result = await update_both(test_database, assignments, merchant_id, org_id)

        assert result.outcome is DualVersionOutcome.V2_FAILED
        assert isinstance(result.v1, Success)
        assert isinstance(result.v2, Failure)
        assert await stored_role_ids(test_database, assignments) == {
            "v1": ROLE_ID_MERCHANT_ADMIN,
            "v2": OLD_ROLE_ID,
        }

    async def test_v1_failure_does_not_block_v2(
        self, test_database, assignments, lock_version, merchant_id, org_id
    ):
        await lock_version(UserRoleVersion.V1)

        result = await update_both(test_database, assignments, merchant_id, org_id)

        assert result.outcome is DualVersionOutcome.V1_FAILED
        assert await stored_role_ids(test_database, assignments) == {
            "v1": OLD_ROLE_ID,
            "v2": ROLE_ID_MERCHANT_ADMIN,
        }


@pytest.mark.integration
class TestUpdateUserRoleHandlerIntegration:
    """Test cache warm-up ordering around the commit."""

    @pytest.fixture
    def cache_service(self):
        return AsyncMock(spec=RolePermissionCacheService)

    def build_handler(self, session, cache_service) -> UpdateUserRoleHandler:
        return UpdateUserRoleHandler(
            role_registry=RoleRegistry(role_repo=RoleRepository(session)),
            user_role_update_service=UserRoleUpdateService(
                user_role_repo=UserRoleRepository(session),
                logger=Mock(spec=LoggerProtocol),
            ),
            cache_service=cache_service,
            after_commit=partial(register_after_commit, session),
        )

    def command(self, user_id, merchant_id, org_id) -> UpdateUserRole:
        return UpdateUserRole(
            user_id=user_id,
            org_id=org_id,
            merchant_id=merchant_id,
            role_id=ROLE_ID_MERCHANT_ADMIN,
            updated_by="user_editor",
        )

    async def test_cache_warmed_from_committed_rows(
        self, test_database, assignments, cache_service, merchant_id, org_id
    ):
        seen_at_warm_up = {}

        async def record_committed_state(role_id, merchant, org):
            seen_at_warm_up.update(await stored_role_ids(test_database, assignments))
            return True

        cache_service.get_or_populate.side_effect = record_committed_state

        async with test_database.get_session() as session:
            handler = self.build_handler(session, cache_service)
            result = await handler.handle(
                self.command(assignments, merchant_id, org_id)
            )
            assert isinstance(result, Success)
            cache_service.get_or_populate.assert_not_called()

        cache_service.get_or_populate.assert_awaited_once_with(
            ROLE_ID_MERCHANT_ADMIN, merchant_id, org_id
        )
        assert seen_at_warm_up == {
            "v1": ROLE_ID_MERCHANT_ADMIN,
            "v2": ROLE_ID_MERCHANT_ADMIN,
        }

    async def test_rolled_back_update_skips_cache(
        self, test_database, assignments, cache_service, merchant_id, org_id
    ):
        with pytest.raises(RuntimeError):
            async with test_database.get_session() as session:
                handler = self.build_handler(session, cache_service)
                await handler.handle(self.command(assignments, merchant_id, org_id))
                raise RuntimeError("request aborted")

        cache_service.get_or_populate.assert_not_called()
        assert await stored_role_ids(test_database, assignments) == {
            "v1": OLD_ROLE_ID,
            "v2": OLD_ROLE_ID,
        }
