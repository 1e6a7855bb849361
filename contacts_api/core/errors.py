"""Error Hierarchy - typed, categorized exceptions for all contact failure modes.

Invariants:
    - Every error has a code (str), an error label (str), category, severity and HTTP status
    - Domain errors (400-level) are recoverable; storage errors (500-level) are critical
    - to_response() produces the REST envelope {"error", "message", "code", ...}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ContactsError base: FastAPI global handler catches all
    - error label kept short and human ("Duplicate email"): clients match on it,
      code stays machine-oriented for logs
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


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
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    contact_id: str | None = None


class ContactsError(Exception):
    """Base exception for all contacts API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        error: str = "Server error",
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.error = error

    def extra_fields(self) -> dict:
        return {}

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": self.error,
            "message": self.message,
            "code": self.code,
            **self.extra_fields(),
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class MissingFieldsError(ContactsError):
    """One or more required contact fields missing or blank."""
    def __init__(self, fields: list[str], context: ErrorContext | None = None):
        super().__init__(
            "Name, email, and phone are required",
            "MISSING_FIELDS", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400, "Missing required fields",
        )
        self.fields = fields

    def extra_fields(self) -> dict:
        return {"fields": self.fields}


class InvalidIdentifierError(ContactsError):
    """Identifier is not a well-formed store id."""
    def __init__(self, raw_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.contact_id = raw_id
        super().__init__(
            "The provided ID is not valid",
            "INVALID_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400, "Invalid ID",
        )


class ContactNotFoundError(ContactsError):
    """Well-formed id with no matching record."""
    def __init__(self, contact_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.contact_id = contact_id
        super().__init__(
            f"Contact with id {contact_id} does not exist",
            "CONTACT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404, "Contact not found",
        )


class DuplicateFieldError(ContactsError):
    """Write rejected because a unique field value is already taken."""
    def __init__(self, field: str, updating: bool = False, context: ErrorContext | None = None):
        owner = "Another contact" if updating else "A contact"
        super().__init__(
            f"{owner} with this {field} already exists",
            "DUPLICATE_FIELD", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409, f"Duplicate {field}",
        )
        self.field = field

    def extra_fields(self) -> dict:
        return {"field": self.field}


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageUnavailableError(ContactsError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORAGE_UNAVAILABLE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500, "Server error",
        )
        self.operation = operation
