"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - IdentityId wraps UUID, PostId wraps int — never use bare ids in domain logic
    - Credential outcomes encoded as Enums — no raw string matching
    - Result objects never carry a password or password hash; LoginResult carries
      the token only when status is OK

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Frozen dataclasses for store records: rows are read once and never mutated
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

IdentityId = NewType("IdentityId", UUID)
PostId = NewType("PostId", int)


# ─── Enums ───────────────────────────────────────────────────────

class RegistrationStatus(str, Enum):
    """Registration outcomes — map 1:1 onto HTTP 201/409/403/503."""
    CREATED = "created"
    CONFLICT = "conflict"
    FORBIDDEN = "forbidden"
    ERROR = "error"


class LoginStatus(str, Enum):
    """Login outcomes. UNAUTHORIZED covers unknown user and wrong password alike."""
    OK = "ok"
    UNAUTHORIZED = "unauthorized"


# ─── Store Records ───────────────────────────────────────────────

@dataclass(frozen=True)
class LoginRecord:
    """Columns needed to verify a password. All None before registration."""
    salt: str | None
    token: str | None
    password_hash: str | None

    @property
    def is_registered(self) -> bool:
        return bool(self.salt and self.password_hash and self.token)


@dataclass(frozen=True)
class RegistrationRecord:
    """Columns needed to decide whether an identity may register."""
    identity_id: IdentityId
    token: str | None

    @property
    def is_registered(self) -> bool:
        return self.token is not None


# ─── Workflow Results ────────────────────────────────────────────

@dataclass(frozen=True)
class RegistrationResult:
    status: RegistrationStatus
    username: str


@dataclass(frozen=True)
class LoginResult:
    status: LoginStatus
    username: str
    token: str | None = None

    def __repr__(self) -> str:
        # token is a bearer secret; keep it out of reprs and tracebacks
        shown = "***" if self.token else None
        return (
            f"LoginResult(status={self.status!r}, "
            f"username={self.username!r}, token={shown!r})"
        )
