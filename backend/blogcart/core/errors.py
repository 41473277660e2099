"""Error Hierarchy — typed, categorized exceptions for all blogcart failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404) are recoverable; persistence faults (500) are critical
    - to_response() always carries an "error" string and a "code"
    - Raw database messages never reach a response unless expose_detail is set

Design Decisions:
    - Single hierarchy with BlogcartError base: FastAPI global handler catches all (ADR: uniform error shape)
    - "error" is a flat string, not a nested object: existing clients read body.error as text
"""

from enum import Enum
from typing import Any


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
    INTERNAL = "internal"


class BlogcartError(Exception):
    """Base exception for all blogcart errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        details: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        body: dict[str, Any] = {
            "error": self.message,
            "code": self.code,
            "category": self.category.value,
        }
        if self.details:
            body["details"] = self.details
        return body


# ─── Client Errors (400-level) ──────────────────────────────────

class ClientError(BlogcartError):
    """Malformed request: bad identifiers or payloads that fail schema checks."""
    def __init__(
        self,
        message: str,
        code: str = "CLIENT_ERROR",
        details: list[dict[str, Any]] | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400, details,
        )


class InvalidIdentifierError(ClientError):
    """An identifier arriving as text is not an integer within the key range."""
    def __init__(self, raw: str, field: str = "id"):
        super().__init__(
            f"Invalid {field}: '{raw}' is not a valid id",
            "INVALID_IDENTIFIER",
        )
        self.raw = raw
        self.field = field


class ArticleValidationError(ClientError):
    """Article payload failed schema checks. Nothing was persisted."""
    def __init__(self, details: list[dict[str, Any]]):
        super().__init__("Invalid article data", "VALIDATION_ERROR", details)


class ResourceNotFoundError(BlogcartError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: Any = None):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConstraintViolationError(BlogcartError):
    """A uniqueness or relational integrity rule rejected the write."""
    def __init__(self, resource_type: str, message: str | None = None):
        super().__init__(
            message or f"{resource_type} violates a uniqueness or relational constraint",
            "CONSTRAINT_VIOLATION", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 400,
        )
        self.resource_type = resource_type


# ─── Infrastructure Errors (500-level) ──────────────────────────

class PersistenceFaultError(BlogcartError):
    """Unexpected store error. Message names the failed operation only."""
    def __init__(self, operation: str, detail: str | None = None):
        super().__init__(
            detail or f"Failed to {operation}",
            "PERSISTENCE_FAULT", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
