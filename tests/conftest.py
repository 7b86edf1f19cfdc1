"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Environment defaults are set before any hardball module reads settings
    - Every test gets a fresh in-memory SQLite database with the full schema
"""

import os

# Ensure tests never reach a real database or serve a real front end
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("PBKDF2_ITERATIONS", "1000")
os.environ.setdefault("STATIC_DIR", "tests/_no_static_dir")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402

import hardball.models  # noqa: E402, F401
from hardball.db.base import Base  # noqa: E402
from hardball.infrastructure.credential_store import SqlCredentialUnitOfWork  # noqa: E402
from hardball.infrastructure.database import DatabaseSessionManager  # noqa: E402
from hardball.services.credentials import CredentialService  # noqa: E402

TEST_ITERATIONS = 1000


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.close()


@pytest.fixture
def sql_uow(db_manager):
    return SqlCredentialUnitOfWork(db_manager)


@pytest.fixture
def sql_service(sql_uow):
    return CredentialService(sql_uow, iterations=TEST_ITERATIONS)


@pytest.fixture
def provision(sql_uow):
    """Whitelist a username in the SQL test database."""
    async def _provision(username: str):
        async with sql_uow.transaction() as store:
            return await store.provision(username)
    return _provision
