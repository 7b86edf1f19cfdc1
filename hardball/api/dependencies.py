"""Route Dependencies — DB sessions, credential service and the authorization gate.

Invariants:
    - Every dependency resolves the store through app.state.db_manager
    - require_authorization raises UnauthorizedError (401) on a missing, malformed
      or unmatched Authorization header, before the route body runs
"""

import logging
from typing import AsyncGenerator

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from hardball.config import get_settings
from hardball.core.errors import ErrorContext, UnauthorizedError
from hardball.core.credential_parsing import parse_credential
from hardball.infrastructure.credential_store import SqlCredentialUnitOfWork
from hardball.infrastructure.database import (
    DatabaseSessionManager, get_db_manager,
)
from hardball.services.credentials import CredentialService

logger = logging.getLogger(__name__)


async def get_db(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with db_manager.session() as session:
        yield session


def get_credential_service(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> CredentialService:
    settings = get_settings()
    return CredentialService(
        SqlCredentialUnitOfWork(db_manager),
        iterations=settings.pbkdf2_iterations,
        secret_bytes=settings.secret_bytes,
    )


async def require_authorization(
    request: Request,
    authorization: str | None = Header(None),
    service: CredentialService = Depends(get_credential_service),
) -> str:
    """Gate for mutating routes. Returns the authorized username."""
    if not await service.authorize(authorization):
        logger.warning(
            "Unauthorized request", extra={"path": request.url.path},
        )
        raise UnauthorizedError(ErrorContext(path=request.url.path))
    username, _ = parse_credential(authorization)
    return username
