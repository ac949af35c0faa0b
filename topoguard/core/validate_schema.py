"""Schema-Copy Validation — validate a candidate against a schema, then hand back a private copy.

Invariants:
    - On schema failure the engine's error is returned unchanged and nothing is copied
    - On success the result is a deep copy of the candidate, never the candidate itself
    - The candidate is never mutated

Design Decisions:
    - Copy the whole candidate, not the parsed model: unknown keys pass through
      (no projection onto schema-declared fields)
    - check_schema is the only place pydantic's ValidationError is caught; it is
      translated to a ValidationFailure at the engine boundary
"""

import copy
from typing import Any

from pydantic import TypeAdapter, ValidationError

from topoguard.core.domain_types import FailureKind, ValidationErrorCode
from topoguard.core.state_schemas import PEER_LIST_SCHEMA, REPLICATION_STATUS_SCHEMA
from topoguard.core.validation_result import ValidationFailure, ValidationResult


def check_schema(schema: TypeAdapter, candidate: Any) -> ValidationFailure | None:
    """Run the schema engine. Returns a SCHEMA_VIOLATION failure or None."""
    try:
        schema.validate_python(candidate)
    except ValidationError as exc:
        return ValidationFailure(
            ValidationErrorCode.SCHEMA_VIOLATION,
            FailureKind.SCHEMA_VIOLATION,
            str(exc),
            {"errors": exc.errors(
                include_url=False, include_context=False, include_input=False,
            )},
        )
    return None


def validate_and_copy(schema: TypeAdapter, candidate: Any) -> ValidationResult:
    error = check_schema(schema, candidate)
    if error is not None:
        return ValidationResult.failure(error)
    return ValidationResult.success(copy.deepcopy(candidate))


def validate_peer_list(peers: Any) -> ValidationResult[list[dict]]:
    """Peers registered in the coordination service."""
    return validate_and_copy(PEER_LIST_SCHEMA, peers)


def validate_replication_status(status: Any) -> ValidationResult[dict]:
    """Replication status reported by the local database."""
    return validate_and_copy(REPLICATION_STATUS_SCHEMA, status)
