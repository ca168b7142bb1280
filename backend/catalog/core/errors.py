"""Error Hierarchy — typed, categorized exceptions for all catalog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; storage errors (500-level) are critical
    - to_response() produces the REST body {"message": ...}
    - No internal details leaked in user-facing messages (context.user_message wins)

Design Decisions:
    - Single hierarchy with CatalogError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Body keeps the legacy {"message": ...} shape consumed by the web frontend
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    item_id: int | None = None
    image_filename: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class CatalogError(Exception):
    """Base exception for all catalog errors."""

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
    def is_client_error(self) -> bool:
        return self.http_status < 500

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"message": self.context.user_message or self.message}

    def to_log_extra(self) -> dict:
        """Structured fields for the JSON log formatter."""
        return {
            "error_code": self.code,
            "item_id": self.context.item_id,
            "image_filename": self.context.image_filename,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidInputError(CatalogError):
    """Caller-supplied field missing or malformed."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class NotFoundError(CatalogError):
    """Valid id, no matching record."""
    def __init__(self, item_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.item_id = item_id
        super().__init__(
            "Not found", "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.item_id = item_id


class BadRequestError(CatalogError):
    """Requested image filename rejected before touching the filesystem."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "BAD_REQUEST", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


# ─── Storage Errors (500-level) ─────────────────────────────────

class StorageUnavailableError(CatalogError):
    """Backing medium cannot be opened or written."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "Storage unavailable"
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_UNAVAILABLE", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation


class CorruptStoreError(CatalogError):
    """Persisted data exists but cannot be decoded."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "Stored data is corrupt"
        super().__init__(
            f"Item store is corrupt: {message}",
            "CORRUPT_STORE", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )


class PlaceholderMissingError(CatalogError):
    """Default placeholder image absent from the image directory."""
    def __init__(self, path: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "Image unavailable"
        super().__init__(
            f"Default placeholder image missing: {path}",
            "PLACEHOLDER_MISSING", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.path = path
