"""SQL Credential Store — SQLAlchemy implementation of CredentialStore.

Invariants:
    - A SqlCredentialStore only ever uses the session it was built with; it never
      commits or rolls back (the owning transaction does)
    - activate() is a single conditional UPDATE (`token IS NULL`), so two concurrent
      activations of one row cannot both report success
    - find_for_registration() locks the row (SELECT ... FOR UPDATE) on dialects
      that support it; SQLite ignores the clause
    - Reads never mutate; provision() is the only INSERT

Design Decisions:
    - Column-level selects instead of full ORM entities: callers receive frozen
      records, never live Identity objects carrying secrets
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hardball.core.domain_types import (
    IdentityId, LoginRecord, RegistrationRecord,
)
from hardball.core.errors import AlreadyProvisionedError
from hardball.infrastructure.database import DatabaseSessionManager
from hardball.models.identity import Identity

logger = logging.getLogger(__name__)


class SqlCredentialStore:
    """Identity queries bound to one open AsyncSession transaction."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_auth_by(self, username: str, token: str) -> bool:
        result = await self._session.execute(
            select(Identity.id).where(
                Identity.username == username,
                Identity.token == token,
            ),
        )
        return result.first() is not None

    async def find_for_login(self, username: str) -> LoginRecord | None:
        result = await self._session.execute(
            select(
                Identity.salt, Identity.token, Identity.password_hash,
            ).where(Identity.username == username),
        )
        row = result.one_or_none()
        if row is None:
            return None
        return LoginRecord(
            salt=row.salt, token=row.token, password_hash=row.password_hash,
        )

    async def find_for_registration(
        self, username: str,
    ) -> RegistrationRecord | None:
        result = await self._session.execute(
            select(Identity.id, Identity.token)
            .where(Identity.username == username)
            .with_for_update(),
        )
        row = result.one_or_none()
        if row is None:
            return None
        return RegistrationRecord(
            identity_id=IdentityId(row.id), token=row.token,
        )

    async def activate(
        self,
        identity_id: IdentityId,
        salt: str,
        token: str,
        password_hash: str,
    ) -> bool:
        """Set salt, token and hash in one statement, only on a token-less row."""
        result = await self._session.execute(
            update(Identity)
            .where(Identity.id == identity_id, Identity.token.is_(None))
            .values({
                Identity.salt: salt,
                Identity.token: token,
                Identity.password_hash: password_hash,
            })
            .execution_options(synchronize_session=False),
        )
        return result.rowcount == 1

    async def provision(self, username: str) -> IdentityId:
        """Whitelist a username: insert a row with no credentials."""
        identity = Identity(username=username)
        self._session.add(identity)
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise AlreadyProvisionedError(username) from e
        logger.info(
            "Identity provisioned",
            extra={"username": username, "identity_id": str(identity.id)},
        )
        return IdentityId(identity.id)


class SqlCredentialUnitOfWork:
    """CredentialUnitOfWork backed by DatabaseSessionManager.transaction()."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db_manager = db_manager

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[SqlCredentialStore, None]:
        async with self._db_manager.transaction() as session:
            yield SqlCredentialStore(session)
