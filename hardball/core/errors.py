"""Error Hierarchy — typed, categorized exceptions for all Hardball failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages; never carries a password,
      hash or token

Design Decisions:
    - Single hierarchy with HardballError base: FastAPI global handler catches all
    - Credential workflows return outcome values; these errors are raised at the
      HTTP boundary, except TransientStoreError which is raised by the store
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    username: str | None = None
    path: str | None = None
    debug_info: dict[str, Any] | None = None


class HardballError(Exception):
    """Base exception for all Hardball errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class MalformedInputError(HardballError):
    """Request body is missing required fields."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "MALFORMED_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class NotWhitelistedError(HardballError):
    """Registration attempted for a username that was never provisioned."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "This user is not allowed to register!",
            "NOT_WHITELISTED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class AlreadyRegisteredError(HardballError):
    """Registration attempted for an identity that already holds a token."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "User is already registered!",
            "ALREADY_REGISTERED", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


class InvalidCredentialsError(HardballError):
    """Login failed. Same message for unknown user and wrong password."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Either the username or password is incorrect",
            "INVALID_CREDENTIALS", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class UnauthorizedError(HardballError):
    """Presented username:token credential did not match an active identity."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Unauthorized!",
            "UNAUTHORIZED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ResourceNotFoundError(HardballError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class AlreadyProvisionedError(HardballError):
    """Whitelisting attempted for a username that already has an identity row."""
    def __init__(self, username: str, context: ErrorContext | None = None):
        super().__init__(
            f"Identity '{username}' is already provisioned",
            "ALREADY_PROVISIONED", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.username = username


# ─── Infrastructure Errors (500-level) ──────────────────────────

class TransientStoreError(HardballError):
    """Credential or content store operation failed; transaction rolled back."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "TRANSIENT_STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
