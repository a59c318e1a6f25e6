"""Error Hierarchy — typed, categorized exceptions for all JobHorizon failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() always carries the {success, message} pair clients read
    - No internal details leaked in user-facing messages
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    email: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class JobHorizonError(Exception):
    """Base exception for all JobHorizon errors."""

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
            "success": False,
            "message": self.message,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            },
        }


# ─── Auth Errors ────────────────────────────────────────────────

class UnauthorizedError(JobHorizonError):
    """Missing, malformed or unverifiable identity token."""
    def __init__(self, reason: str = "missing token", context: ErrorContext | None = None):
        super().__init__(
            "unauthorized access", "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )
        self.reason = reason


class ForbiddenError(JobHorizonError):
    """Verified identity does not own the requested resource."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "forbidden access", "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(JobHorizonError):
    """Requested resource does not exist."""
    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        context: ErrorContext | None = None,
        message: str | None = None,
    ):
        super().__init__(
            message or f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class NotUpdatedError(JobHorizonError):
    """Update matched a job but changed none of its fields."""
    def __init__(self, job_id: str, context: ErrorContext | None = None):
        super().__init__(
            "Job can't be updated", "NOT_UPDATED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.INFO, context, 404,
        )
        self.job_id = job_id


class DuplicateApplicationError(JobHorizonError):
    """Applicant already has an application for this job."""
    def __init__(self, email: str, job_id: str, context: ErrorContext | None = None):
        super().__init__(
            "You have already applied on this job.",
            "DUPLICATE_APPLICATION", ErrorCategory.CONFLICT,
            ErrorSeverity.INFO, context, 400,
        )
        self.email = email
        self.job_id = job_id


class ApplyFailedError(JobHorizonError):
    """Application could not be recorded against an existing job."""
    def __init__(self, job_id: str, context: ErrorContext | None = None):
        super().__init__(
            "Job Apply Unsuccessful", "APPLY_FAILED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 404,
        )
        self.job_id = job_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class WriteNotAcknowledgedError(JobHorizonError):
    """Database accepted the call but did not confirm the write."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            "Internal Error", "WRITE_NOT_ACKNOWLEDGED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class DatabaseError(JobHorizonError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
