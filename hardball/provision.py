"""Identity Provisioning — whitelists usernames so they may register.

Usage:
    python -m hardball.provision alice bob

Invariants:
    - Only inserts token-less identity rows; never sets credentials
    - Each username is provisioned in its own transaction
    - Exit status is 1 if any username was already provisioned, 0 otherwise
"""

import argparse
import asyncio
import logging
import sys

from hardball.config import get_settings
from hardball.core.errors import AlreadyProvisionedError
from hardball.core.repository_protocols import CredentialUnitOfWork
from hardball.infrastructure.credential_store import SqlCredentialUnitOfWork
from hardball.infrastructure.database import DatabaseSessionManager
from hardball.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


async def provision_usernames(
    uow: CredentialUnitOfWork, usernames: list[str],
) -> list[str]:
    """Provision each username; return the ones that already existed."""
    existing = []
    for username in usernames:
        try:
            async with uow.transaction() as store:
                await store.provision(username)
        except AlreadyProvisionedError:
            existing.append(username)
            print(f"exists  {username}")
        else:
            print(f"added   {username}")
    return existing


async def _run(usernames: list[str]) -> int:
    settings = get_settings()
    db_manager = DatabaseSessionManager(
        settings.database_url, ssl=settings.database_ssl,
    )
    try:
        existing = await provision_usernames(
            SqlCredentialUnitOfWork(db_manager), usernames,
        )
    finally:
        await db_manager.close()
    return 1 if existing else 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hardball.provision",
        description="Whitelist usernames for registration.",
    )
    parser.add_argument("usernames", nargs="+", metavar="USERNAME")
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level, "text")
    return asyncio.run(_run([u.strip() for u in args.usernames if u.strip()]))


if __name__ == "__main__":
    sys.exit(main())
