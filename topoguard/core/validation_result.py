"""Validation Result — discriminated success/failure value returned by every validator.

Invariants:
    - A result holds either a value or an error, never both
    - A successful value may be None (no cluster state yet, no promote request)
    - ValidationFailure is immutable; details carry the offending input values

Design Decisions:
    - Return values over exceptions: the orchestrator inspects every outcome,
      keeping the failure path identical to the success path
    - to_dict() renders the same error-dict shape the enforcement rules emit
      ({"status": "error", "error_code": ..., "message": ...})
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from topoguard.core.domain_types import FailureKind, ValidationErrorCode

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationFailure:
    """Structured reason a candidate was rejected."""
    code: ValidationErrorCode
    kind: FailureKind
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def invariant(
        cls, code: ValidationErrorCode, message: str, **details: Any,
    ) -> "ValidationFailure":
        return cls(code, FailureKind.INVARIANT_VIOLATION, message, details)

    def to_dict(self) -> dict:
        return {
            "status": "error",
            "error_code": self.code.value,
            "kind": self.kind.value,
            "message": self.message,
            **self.details,
        }


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Either a sanitized value or a ValidationFailure."""
    value: T | None = None
    error: ValidationFailure | None = None

    def __post_init__(self):
        if self.error is not None and self.value is not None:
            raise ValueError("ValidationResult cannot hold both value and error")

    @classmethod
    def success(cls, value: T | None) -> "ValidationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ValidationFailure) -> "ValidationResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def absent(self) -> bool:
        """Successful, but there was nothing to validate."""
        return self.ok and self.value is None
