"""Identity ORM — one row per whitelisted user (table `auth`).

Invariants:
    - id is UUID primary key, assigned at provisioning, immutable
    - username is unique and case-sensitive
    - salt, pass_hash, token are all NULL (provisioned) or all set (registered);
      the CHECK constraint rejects any partial state
    - token never changes once set (no rotation)

Design Decisions:
    - Table name `auth` and column `pass_hash` kept from the existing schema
    - Python attribute password_hash maps onto column pass_hash
"""

import uuid

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from hardball.db.base import Base

CREDENTIALS_ALL_OR_NOTHING = (
    "(salt IS NULL AND pass_hash IS NULL AND token IS NULL) OR "
    "(salt IS NOT NULL AND pass_hash IS NOT NULL AND token IS NOT NULL)"
)


class Identity(Base):
    """Identity row — authentication state for one user."""
    __tablename__ = "auth"
    __table_args__ = (
        CheckConstraint(
            CREDENTIALS_ALL_OR_NOTHING, name="ck_auth_credentials_atomic",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(64), nullable=False, unique=True,
    )
    salt: Mapped[str | None] = mapped_column(String(128), nullable=True)
    password_hash: Mapped[str | None] = mapped_column(
        "pass_hash", String(256), nullable=True,
    )
    token: Mapped[str | None] = mapped_column(String(128), nullable=True)

    def __repr__(self) -> str:
        return (
            f"Identity(id={self.id!r}, username={self.username!r}, "
            f"registered={self.token is not None})"
        )
