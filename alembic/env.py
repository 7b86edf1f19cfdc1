"""Alembic environment — applies Hardball schema migrations over the async engine.

Design Decisions:
    - Connection URL comes from hardball Settings, so DATABASE_URL is normalised
      to an async driver exactly as the running service sees it
    - Online mode only; migrations run against a live database
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

import hardball.models  # noqa: F401  (registers auth and posts on Base.metadata)
from hardball.config import get_settings
from hardball.db.base import Base

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def _apply(connection) -> None:
    context.configure(connection=connection, target_metadata=Base.metadata)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate() -> None:
    engine = create_async_engine(
        get_settings().database_url, poolclass=pool.NullPool,
    )
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_apply)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    raise SystemExit("Offline migrations are not supported; run against a database")
asyncio.run(_migrate())
