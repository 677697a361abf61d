"""Error Hierarchy - typed, categorized exceptions for every inventory failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation and not-found errors (400/404) are routine and recoverable
    - Storage faults (500) are the only CRITICAL category
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with InventoryError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    product_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class InventoryError(Exception):
    """Base exception for all inventory errors."""

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
    def is_critical(self) -> bool:
        return self.severity == ErrorSeverity.CRITICAL

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
                    "product_id": self.context.product_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ProductValidationError(InventoryError):
    """Candidate failed one or more field rules."""
    def __init__(
        self, field_errors: dict[str, str], context: ErrorContext | None = None,
    ):
        super().__init__(
            "Validation failed", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field_errors = dict(field_errors)

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = [
            {"field": name, "message": message}
            for name, message in self.field_errors.items()
        ]
        response["error"]["field_errors"] = self.field_errors
        return response


class ProductNotFoundError(InventoryError):
    """No product with the requested id."""
    def __init__(self, product_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.product_id = product_id
        super().__init__(
            "Product not found", "PRODUCT_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, ctx, 404,
        )
        self.product_id = product_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageFaultError(InventoryError):
    """The persisted collection could not be read or written."""
    def __init__(
        self,
        message: str,
        operation: str,
        code: str = "STORAGE_UNAVAILABLE",
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Product storage {operation} failed: {message}",
            code, ErrorCategory.STORAGE, ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation


class CorruptStorageError(StorageFaultError):
    """The persisted document exists but is not a valid product collection."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, "read", "STORAGE_CORRUPT", context)
