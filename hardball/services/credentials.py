"""Credential Service — registration, login and authorization workflows.

Invariants:
    - register() transitions an existing, token-less identity exactly once; it
      never creates an identity
    - register() runs lookup and activation inside ONE transaction; a lost
      activation race is reported as CONFLICT, a store failure as ERROR with
      the row left in its prior state
    - login() gives identical results for unknown user, unregistered user and
      wrong password; hashes compared with hashes_match()
    - authorize() returns False for malformed credentials and never raises for them;
      store failures propagate as TransientStoreError
    - Passwords, hashes and tokens never appear in logs or in RegistrationResult

Design Decisions:
    - Unit of work injected at construction, no ambient store handle
    - PBKDF2 runs in a worker thread (asyncio.to_thread) so the event loop keeps
      serving other requests during the ~100k iterations
"""

import asyncio
import logging

from hardball.core.credential_parsing import parse_credential
from hardball.core.domain_types import (
    LoginResult, LoginStatus, RegistrationResult, RegistrationStatus,
)
from hardball.core.errors import TransientStoreError
from hardball.core.repository_protocols import CredentialUnitOfWork
from hardball.core.secret_derivation import (
    DEFAULT_ITERATIONS, DEFAULT_SECRET_BYTES,
    derive, generate_secret_hex, hashes_match,
)

logger = logging.getLogger(__name__)

# Burned on logins for unknown/unregistered users so they cost one derivation too
_PLACEHOLDER_SALT = "0" * (DEFAULT_SECRET_BYTES * 2)


class CredentialService:
    """Whitelist-gated registration, password login and token authorization."""

    def __init__(
        self,
        uow: CredentialUnitOfWork,
        iterations: int = DEFAULT_ITERATIONS,
        secret_bytes: int = DEFAULT_SECRET_BYTES,
    ):
        self._uow = uow
        self._iterations = iterations
        self._secret_bytes = secret_bytes

    async def register(self, username: str, password: str) -> RegistrationResult:
        """Activate a whitelisted identity. Returns the outcome, never the token."""
        try:
            async with self._uow.transaction() as store:
                record = await store.find_for_registration(username)
                if record is None:
                    logger.info(
                        "Registration refused: not whitelisted",
                        extra={"username": username},
                    )
                    return RegistrationResult(
                        RegistrationStatus.FORBIDDEN, username,
                    )
                if record.is_registered:
                    logger.info(
                        "Registration refused: already registered",
                        extra={"username": username},
                    )
                    return RegistrationResult(
                        RegistrationStatus.CONFLICT, username,
                    )

                salt = generate_secret_hex(self._secret_bytes)
                token = generate_secret_hex(self._secret_bytes)
                password_hash = await asyncio.to_thread(
                    derive, password, salt, self._iterations,
                )
                activated = await store.activate(
                    record.identity_id, salt, token, password_hash,
                )
                if not activated:
                    logger.warning(
                        "Registration lost activation race",
                        extra={"username": username},
                    )
                    return RegistrationResult(
                        RegistrationStatus.CONFLICT, username,
                    )
        except TransientStoreError as e:
            logger.error(
                f"Registration aborted: {e.message}",
                extra={"username": username, "error_code": e.code},
            )
            return RegistrationResult(RegistrationStatus.ERROR, username)

        logger.info(
            "Identity registered",
            extra={"username": username, "identity_id": str(record.identity_id)},
        )
        return RegistrationResult(RegistrationStatus.CREATED, username)

    async def login(self, username: str, password: str) -> LoginResult:
        """Verify a password and hand back the token issued at registration."""
        async with self._uow.transaction() as store:
            record = await store.find_for_login(username)

        if record is None or not record.is_registered:
            await asyncio.to_thread(
                derive, password, _PLACEHOLDER_SALT, self._iterations,
            )
            logger.info("Login rejected", extra={"username": username})
            return LoginResult(LoginStatus.UNAUTHORIZED, username)

        candidate = await asyncio.to_thread(
            derive, password, record.salt, self._iterations,
        )
        if not hashes_match(candidate, record.password_hash):
            logger.info("Login rejected", extra={"username": username})
            return LoginResult(LoginStatus.UNAUTHORIZED, username)

        logger.info("Login succeeded", extra={"username": username})
        return LoginResult(LoginStatus.OK, username, record.token)

    async def authorize(self, credential: str | None) -> bool:
        """True iff `username:token` matches a registered identity."""
        parsed = parse_credential(credential)
        if parsed is None:
            return False
        username, token = parsed
        async with self._uow.transaction() as store:
            return await store.find_auth_by(username, token)
