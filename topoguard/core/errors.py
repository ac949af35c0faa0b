"""Error Hierarchy — typed, categorized exceptions for the imperative shell.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Core validators never raise these: they return ValidationResult values.
      Only services/ and api/ convert a failed result into an exception
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TopoGuardError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from topoguard.core.domain_types import FailureKind
from topoguard.core.validation_result import ValidationFailure


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INVARIANT = "invariant"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    validator: str | None = None
    generation: int | None = None
    debug_info: dict[str, Any] | None = None


class TopoGuardError(Exception):
    """Base exception for all topoguard errors."""

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
                    "validator": self.context.validator,
                    "generation": self.context.generation,
                    "details": self.context.debug_info,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class StateValidationError(TopoGuardError):
    """A snapshot, peer list, status or promote request was rejected."""
    def __init__(self, failure: ValidationFailure, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = failure.details or None
        category = (
            ErrorCategory.VALIDATION
            if failure.kind == FailureKind.SCHEMA_VIOLATION
            else ErrorCategory.INVARIANT
        )
        super().__init__(
            failure.message, failure.code.value, category,
            ErrorSeverity.ERROR, ctx, 422,
        )
        self.failure = failure
