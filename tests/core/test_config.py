"""Configuration — verifies database URL normalisation and defaults."""

import pytest

from hardball.config import Settings


@pytest.mark.parametrize(
    "raw",
    ["postgres://u:p@db:5432/hb", "postgresql://u:p@db:5432/hb"],
)
def test_postgres_urls_use_asyncpg(raw):
    settings = Settings(database_url=raw)
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/hb"


def test_async_urls_unchanged():
    url = "sqlite+aiosqlite:///:memory:"
    assert Settings(database_url=url).database_url == url


def test_credential_defaults(monkeypatch):
    monkeypatch.delenv("PBKDF2_ITERATIONS", raising=False)
    settings = Settings()
    assert settings.pbkdf2_iterations == 100_000
    assert settings.secret_bytes == 32
