"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All credential IO accessed through CredentialStore / CredentialUnitOfWork
    - A CredentialStore is bound to exactly one open transaction
    - Store failures raise TransientStoreError; "not found" is None/False, never an error

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - activate() is a compare-and-swap: returns False instead of overwriting
      when the row already carries a token
"""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from hardball.core.domain_types import (
    IdentityId, LoginRecord, RegistrationRecord,
)


class CredentialStore(Protocol):
    """Contract for identity persistence — implemented by shell."""
    async def find_auth_by(self, username: str, token: str) -> bool: ...
    async def find_for_login(self, username: str) -> LoginRecord | None: ...
    async def find_for_registration(
        self, username: str,
    ) -> RegistrationRecord | None: ...
    async def activate(
        self,
        identity_id: IdentityId,
        salt: str,
        token: str,
        password_hash: str,
    ) -> bool: ...
    async def provision(self, username: str) -> IdentityId: ...


class CredentialUnitOfWork(Protocol):
    """Hands out transaction-scoped stores.

    transaction() commits on clean exit, rolls back on any exception and
    always releases the underlying connection.
    """
    def transaction(self) -> AbstractAsyncContextManager[CredentialStore]: ...
