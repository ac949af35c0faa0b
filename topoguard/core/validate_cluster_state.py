"""Cluster-State Validation — sanitize the coordination-service snapshot before use.

Invariants:
    - Works on a private deep copy from the first step; the caller's object is untouched
    - A successful result always has `deposed` (defaulted to []) and a parseable `initWal`
    - `sync` may be None only in one-node-write mode
    - None is a legal "no state yet" snapshot and validates to None

Design Decisions:
    - `deposed` is required by the schema but filled in here: it was added after
      the schema was first deployed, and state written by older versions lacks it.
      Defaulting the copy avoids a migration; callers must use the returned copy
"""

import copy
from typing import Any

from topoguard.core.domain_types import ValidationErrorCode
from topoguard.core.state_schemas import CLUSTER_STATE_SCHEMA
from topoguard.core.validate_schema import check_schema
from topoguard.core.validation_result import ValidationFailure, ValidationResult
from topoguard.core.wal_position import parse_wal_position


def validate_cluster_state(cluster_state: Any) -> ValidationResult[dict]:
    state = copy.deepcopy(cluster_state)
    if isinstance(state, dict) and "deposed" not in state:
        state["deposed"] = []

    error = check_schema(CLUSTER_STATE_SCHEMA, state)
    if error is not None:
        return ValidationResult.failure(error)

    if state is None:
        return ValidationResult.success(None)

    if state["sync"] is None and not state.get("oneNodeWriteMode", False):
        return ValidationResult.failure(ValidationFailure.invariant(
            ValidationErrorCode.SYNC_REQUIRED,
            '"sync" may not be null outside of one-node-write mode',
        ))

    # initWal is not touched by defaulting, so the original is authoritative
    position = parse_wal_position(cluster_state["initWal"])
    if isinstance(position, ValidationFailure):
        return ValidationResult.failure(position)

    return ValidationResult.success(state)
