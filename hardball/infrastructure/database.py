"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - transaction() commits on clean exit, rolls back on any exception, always closes
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to TransientStoreError (core/errors.py)
    - Logged errors never include bound parameters or driver messages
    - No module-level manager: one instance lives on app.state for the process lifetime

Design Decisions:
    - Manager created and disposed by the FastAPI lifespan, handed to routes via
      get_db_manager()
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from hardball.core.errors import TransientStoreError

logger = logging.getLogger(__name__)


def _describe(exc: SQLAlchemyError) -> str:
    """Exception class names only; str(exc) can carry SQL parameters."""
    orig = getattr(exc, "orig", None)
    if orig is None:
        return type(exc).__name__
    return f"{type(exc).__name__} ({type(orig).__name__})"


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 5,
        ssl: bool = False,
    ):
        # Bound values (salts, hashes, tokens) stay out of exception text
        engine_kwargs: dict = {"pool_pre_ping": True, "hide_parameters": True}
        if database_url.startswith("postgresql"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
            if ssl:
                engine_kwargs["connect_args"] = {"ssl": True}
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {_describe(e)}")
            raise TransientStoreError("Integrity constraint violated", "commit") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {_describe(e)}")
            raise TransientStoreError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {_describe(e)}")
            raise TransientStoreError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {_describe(e)}")
            raise TransientStoreError("Database operation failed", "unknown") from e
        finally:
            await session.close()

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession, None]:
        """Session inside BEGIN ... COMMIT; ROLLBACK on any exception."""
        async with self.session() as session:
            async with session.begin():
                yield session

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness checks)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        """Dispose the engine and every pooled connection."""
        await self.engine.dispose()


def get_db_manager(request: Request) -> DatabaseSessionManager:
    """FastAPI dependency for the process-wide session manager."""
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager
