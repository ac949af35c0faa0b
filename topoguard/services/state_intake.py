"""State Intake — run a raw coordination-service snapshot through the validation gate.

Invariants:
    - The promote request is checked against the validated copy, never the raw snapshot
    - A rejected cluster state is returned as a failure value, after being logged
    - A rejected promote request does not reject the snapshot: the state is
      admitted without a promote request and the failure is recorded on it
    - A missing snapshot (None) is admitted with no state and no promote request

Design Decisions:
    - Mirrors the orchestrator cycle: cluster state first, promote request second
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from topoguard.core.validate_cluster_state import validate_cluster_state
from topoguard.core.validate_promotion import validate_promotion_request
from topoguard.core.validate_schema import validate_peer_list, validate_replication_status
from topoguard.core.validation_result import ValidationFailure, ValidationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdmittedSnapshot:
    """A snapshot that is safe to hand to the actuation layer."""
    state: dict | None
    promote: dict | None = None
    promote_error: ValidationFailure | None = None


def admit_cluster_snapshot(
    raw: object, now: datetime | None = None,
) -> ValidationResult[AdmittedSnapshot]:
    """Validate a snapshot and its embedded promote request."""
    state_result = validate_cluster_state(raw)
    if not state_result.ok:
        _log_rejection("cluster_state", state_result, generation=_generation_of(raw))
        return ValidationResult.failure(state_result.error)

    state = state_result.value
    if state is None:
        logger.info("No cluster state yet", extra={"validator": "cluster_state"})
        return ValidationResult.success(AdmittedSnapshot(state=None))

    promote_result = validate_promotion_request(state, now=now)
    if not promote_result.ok:
        _log_rejection("promotion_request", promote_result, generation=state["generation"])
        return ValidationResult.success(
            AdmittedSnapshot(state=state, promote_error=promote_result.error),
        )

    if promote_result.value is not None:
        logger.info(
            "Promote request accepted for peer %s", promote_result.value["id"],
            extra={
                "validator": "promotion_request",
                "generation": state["generation"],
                "promote_role": promote_result.value["role"],
            },
        )
    logger.debug(
        "Cluster state admitted",
        extra={"validator": "cluster_state", "generation": state["generation"]},
    )
    return ValidationResult.success(
        AdmittedSnapshot(state=state, promote=promote_result.value),
    )


def admit_peer_list(raw: object) -> ValidationResult[list[dict]]:
    result = validate_peer_list(raw)
    if not result.ok:
        _log_rejection("peer_list", result)
    return result


def admit_replication_status(raw: object) -> ValidationResult[dict]:
    result = validate_replication_status(raw)
    if not result.ok:
        _log_rejection("replication_status", result)
    return result


def _log_rejection(
    validator: str, result: ValidationResult, generation: int | None = None,
) -> None:
    logger.warning(
        "Rejected %s: %s", validator.replace("_", " "), result.error.message,
        extra={
            "validator": validator,
            "error_code": result.error.code.value,
            "generation": generation,
        },
    )


def _generation_of(raw: object) -> int | None:
    if isinstance(raw, dict) and isinstance(raw.get("generation"), int):
        return raw["generation"]
    return None
