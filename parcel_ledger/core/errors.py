"""Error Hierarchy — typed, categorized exceptions for all ledger failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller errors (400-level) are never retried; storage errors (500-level) are surfaced as-is
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with LedgerError base: one FastAPI handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    holder_id: str | None = None
    package_id: str | None = None
    operation: str | None = None


class LedgerError(Exception):
    """Base exception for all ledger errors."""

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
                "context": {
                    "holder_id": self.context.holder_id,
                    "package_id": self.context.package_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Caller Errors (400-level) ──────────────────────────────────

class ValidationError(LedgerError):
    """Malformed or missing input."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class NotFoundError(LedgerError):
    """Referenced entity does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(LedgerError):
    """Operation would violate a ledger invariant."""
    def __init__(
        self, message: str, code: str = "CONFLICT", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


class DuplicateHolderNameError(ConflictError):
    """A holder with the same name is already registered."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        super().__init__(
            f"A package holder named '{name}' already exists",
            "DUPLICATE_HOLDER_NAME", context,
        )
        self.name = name


class AlreadyDeliveredError(ConflictError):
    """Delivered is terminal: no further custody transfers."""
    def __init__(self, package_id: str, context: ErrorContext | None = None):
        super().__init__(
            f"Package '{package_id}' is already delivered",
            "ALREADY_DELIVERED", context,
        )
        self.package_id = package_id


class HolderAlreadyHeldPackageError(ConflictError):
    """Custody may not return to a holder already in the delivery history."""
    def __init__(
        self, package_id: str, holder_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Package holder '{holder_id}' already held this package ('{package_id}')",
            "HOLDER_ALREADY_HELD_PACKAGE", context,
        )
        self.package_id = package_id
        self.holder_id = holder_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(LedgerError):
    """Underlying key-value store read or write failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
