"""Service test fixtures — in-memory credential store and FastAPI test client.

Invariants:
    - The test client's app.state.db_manager points at the per-test SQLite
      database and is restored afterwards
    - PBKDF2 runs with 1000 iterations in tests to keep them fast

Design Decisions:
    - SQLite ignores FOR UPDATE, so race behaviour is exercised against the
      in-memory fake instead
"""

import pytest
from httpx import ASGITransport, AsyncClient

from hardball.main import app
from hardball.services.credentials import CredentialService

from tests.conftest import TEST_ITERATIONS
from tests.services.fake_credential_store import InMemoryCredentialUnitOfWork


@pytest.fixture
def memory_uow():
    return InMemoryCredentialUnitOfWork()


@pytest.fixture
def memory_service(memory_uow):
    return CredentialService(memory_uow, iterations=TEST_ITERATIONS)


@pytest.fixture
async def client(db_manager):
    """FastAPI test client bound to the test database."""
    original_manager = getattr(app.state, "db_manager", None)
    app.state.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.db_manager = original_manager


@pytest.fixture
async def registered(client, provision):
    """Provision and register `bob` / `pw1`; returns (username, token)."""
    await provision("bob")
    res = await client.post(
        "/api/auth/register", json={"username": "bob", "password": "pw1"},
    )
    assert res.status_code == 201
    res = await client.post(
        "/api/auth/login", json={"username": "bob", "password": "pw1"},
    )
    assert res.status_code == 200
    return "bob", res.json()["token"]
