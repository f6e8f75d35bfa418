"""Error Hierarchy - typed, categorized exceptions for all forum failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - code is the exact string placed in the envelope's `error` field
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - No internal details leaked in user-facing responses

Design Decisions:
    - Single hierarchy with ForumError base: FastAPI global handler catches all
    - UpdatePreconditionFailedError distinct from UserNotFoundError: a lost
      optimistic write is a conflict, not a missing row
"""

from enum import Enum

from forum.core.envelope import failure


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CLIENT = "client"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class ForumError(Exception):
    """Base exception for all forum errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        details: list[dict] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to the response envelope."""
        return failure(self.code, self.details)


# ─── Domain Errors (400-level) ──────────────────────────────────

class UserValidationError(ForumError):
    """Request body is missing required fields or carries invalid values."""
    def __init__(self, details: list[dict]):
        fields = ", ".join(d["field"] for d in details)
        super().__init__(
            f"Invalid user payload: {fields}",
            "ValidationError", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400, details,
        )


class ClientError(ForumError):
    """Malformed or missing query/path parameter."""
    def __init__(self, message: str):
        super().__init__(
            message, "ClientError", ErrorCategory.CLIENT,
            ErrorSeverity.WARNING, 400,
        )


class UserNotFoundError(ForumError):
    """Referenced user id or email has no matching record."""
    def __init__(self, lookup: str):
        super().__init__(
            f"User '{lookup}' not found",
            "UserNotFound", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )


class UsernameAlreadyTakenError(ForumError):
    """Another user already owns this username."""
    def __init__(self, username: str):
        super().__init__(
            f"Username '{username}' is already taken",
            "UsernameAlreadyTaken", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 409,
        )


class EmailAlreadyInUseError(ForumError):
    """Another user already owns this email."""
    def __init__(self, email: str):
        super().__init__(
            f"Email '{email}' is already in use",
            "EmailAlreadyInUse", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 409,
        )


class UpdatePreconditionFailedError(ForumError):
    """Conditional update matched no row: the user changed since it was read."""
    def __init__(self, user_id: int):
        super().__init__(
            f"User {user_id} was modified concurrently",
            "ConflictError", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class ServerError(ForumError):
    """Unhandled failure - the caller only ever sees the code."""
    def __init__(self, operation: str = "request"):
        super().__init__(
            f"Unhandled failure during {operation}",
            "ServerError", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation

