"""Error Hierarchy — typed, categorized exceptions for every phonebook failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors are 400/404; storage errors are 500 and critical
    - to_response() produces the REST envelope {"error": <public message>}
    - No internal details leaked: StorageError always answers "Internal Server Error"

Design Decisions:
    - Closed set of subclasses under PhonebookError: the HTTP layer switches on the
      type, never on message text
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from phonebook.core.domain_types import PersonField

INTERNAL_ERROR_MESSAGE = "Internal Server Error"
MALFORMATTED_ID_MESSAGE = "Malformatted ID"


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
    CONFIGURATION = "configuration"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    person_id: str | None = None
    debug_info: dict[str, Any] | None = None


class PhonebookError(Exception):
    """Base exception for all phonebook errors."""

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

    @property
    def public_message(self) -> str:
        """Message safe to return to the client."""
        return self.message

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {"error": self.public_message}


# ─── Client Errors (400/404) ────────────────────────────────────

class InvalidIdError(PhonebookError):
    """Identifier is not a well-formed ObjectId string."""
    def __init__(self, person_id: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"person_id": repr(person_id)}
        super().__init__(
            MALFORMATTED_ID_MESSAGE, "INVALID_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )


class PersonValidationError(PhonebookError):
    """Name or number failed validation."""
    def __init__(
        self,
        message: str,
        field: PersonField | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class DuplicateNameError(PhonebookError):
    """A person with the same name already exists."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        super().__init__(
            "Name must be unique", "DUPLICATE_NAME", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )
        self.name = name


class PersonNotFoundError(PhonebookError):
    """No person is stored under a well-formed id."""
    def __init__(self, person_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.person_id = person_id
        super().__init__(
            "Person not found", "PERSON_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(PhonebookError):
    """MongoDB operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation

    @property
    def public_message(self) -> str:
        return INTERNAL_ERROR_MESSAGE


class ConfigurationError(PhonebookError):
    """Required configuration is missing; raised before the server binds."""
    def __init__(self, setting: str, context: ErrorContext | None = None):
        super().__init__(
            f"{setting} is not set", "CONFIGURATION_ERROR",
            ErrorCategory.CONFIGURATION, ErrorSeverity.CRITICAL, context, 500,
        )
        self.setting = setting

    @property
    def public_message(self) -> str:
        return INTERNAL_ERROR_MESSAGE
