"""Fixtures for integration tests against a real PostgreSQL database.

The database comes from DATABASE_URL (see src/core/config.py). Tables are
created from the SQLAlchemy metadata when missing. Tests isolate
themselves with unique organization, merchant and user ids instead of
truncating tables.

When the database is unreachable the integration tests are skipped.
"""

import pytest
import pytest_asyncio
from uuid_extensions import uuid7

from src.core.config import get_settings
from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database

# Register table mappings on BaseModel.metadata
import src.infrastructure.persistence.models  # noqa: F401


def unique_id(prefix: str) -> str:
    """Return a time-ordered id that no other test run uses."""
    return f"{prefix}_{uuid7().hex}"


@pytest_asyncio.fixture
async def test_database():
    """Provide a Database bound to the integration test database.

    Returns the Database object (not a session) so tests can open several
    independent units of work and verify what was actually committed.
    """
    settings = get_settings()
    db = Database(database_url=settings.database_url, echo=settings.db_echo)
    if not await db.check_connection():
        await db.close()
        pytest.skip(f"PostgreSQL not reachable at {settings.database_url}")

    async with db.engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    yield db
    await db.close()


@pytest.fixture
def org_id() -> str:
    return unique_id("org")


@pytest.fixture
def merchant_id() -> str:
    return unique_id("merchant")


@pytest.fixture
def user_id() -> str:
    return unique_id("user")
