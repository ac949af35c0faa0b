"""Promotion-Request Validation — check an operator promote request against its snapshot.

Invariants:
    - No request (no snapshot, or missing or falsy `promote`) is a success with
      value None, not an error
    - The request is re-validated here even if the snapshot already passed
      validate_cluster_state: the snapshot schema does not type `promote`
    - A request is only valid in the generation it was issued for and before expireTime
    - The peer named by the request must occupy the role it claims
    - Checks run in a fixed order; first failure wins

Design Decisions:
    - Role lookup is an explicit role → accessor table, not a dynamic key lookup
      on the snapshot: an unknown role can never reach an arbitrary field
    - Success returns the original `promote` object from the snapshot, not the
      validated copy. Callers must treat it as read-only
    - `now` is injectable so expiry is testable without patching the clock
"""

from datetime import datetime, timezone
from typing import Callable

from topoguard.core.domain_types import PromoteRole, ValidationErrorCode
from topoguard.core.parse_time import parse_date_time
from topoguard.core.state_schemas import PROMOTION_REQUEST_SCHEMA
from topoguard.core.validate_schema import validate_and_copy
from topoguard.core.validation_result import ValidationFailure, ValidationResult


# Non-async roles: where the promoted peer must currently sit
_ROLE_SLOTS: dict[PromoteRole, Callable[[dict], dict | None]] = {
    PromoteRole.SYNC: lambda state: state.get("sync"),
}


def validate_promotion_request(
    cluster_state: dict | None, now: datetime | None = None,
) -> ValidationResult[dict]:
    if cluster_state is None:
        return ValidationResult.success(None)

    promote = cluster_state.get("promote")
    if not promote:
        return ValidationResult.success(None)

    copied = validate_and_copy(PROMOTION_REQUEST_SCHEMA, promote)
    if not copied.ok:
        return copied
    request = copied.value

    error = (
        check_request_timing(request, cluster_state, now)
        or check_role_assignment(request, cluster_state)
    )
    if error is not None:
        return ValidationResult.failure(error)

    return ValidationResult.success(cluster_state["promote"])


def check_request_timing(
    request: dict, cluster_state: dict, now: datetime | None = None,
) -> ValidationFailure | None:
    """expireTime must parse, generation must match, expireTime must not have passed."""
    expire_time = parse_date_time(request["expireTime"])
    if expire_time is None:
        return ValidationFailure.invariant(
            ValidationErrorCode.EXPIRE_TIME_UNPARSEABLE,
            f'expireTime is not parseable (found "{request["expireTime"]}")',
            expireTime=request["expireTime"],
        )

    if request["generation"] != cluster_state.get("generation"):
        return ValidationFailure.invariant(
            ValidationErrorCode.GENERATION_MISMATCH,
            f"generation does not match (expected {cluster_state.get('generation')}, "
            f"found {request['generation']})",
            expected_generation=cluster_state.get("generation"),
            found_generation=request["generation"],
        )

    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    if expire_time < now:
        return ValidationFailure.invariant(
            ValidationErrorCode.PROMOTE_EXPIRED,
            f'expireTime has passed ("{request["expireTime"]}")',
            expireTime=request["expireTime"],
        )
    return None


def check_role_assignment(request: dict, cluster_state: dict) -> ValidationFailure | None:
    """The requested peer must be the one currently holding the requested role."""
    role = PromoteRole(request["role"])
    if role == PromoteRole.ASYNC:
        return _check_async_slot(request, cluster_state)

    peer = _ROLE_SLOTS[role](cluster_state)
    if peer is None or request["id"] != peer.get("id"):
        return ValidationFailure.invariant(
            ValidationErrorCode.ROLE_MISMATCH,
            "id refers to peer in wrong role",
            role=role.value, id=request["id"],
        )
    return None


def _check_async_slot(request: dict, cluster_state: dict) -> ValidationFailure | None:
    index = request.get("asyncIndex")
    if index is None:
        return ValidationFailure.invariant(
            ValidationErrorCode.ASYNC_INDEX_MISSING,
            "asyncIndex required but is missing",
        )

    async_peers = cluster_state.get("async") or []
    if index < 0 or index >= len(async_peers):
        return ValidationFailure.invariant(
            ValidationErrorCode.ASYNC_INDEX_OUT_OF_RANGE,
            f"asyncIndex is out of range ({index} not in [0, {len(async_peers)}))",
            asyncIndex=index, async_count=len(async_peers),
        )

    if request["id"] != async_peers[index].get("id"):
        return ValidationFailure.invariant(
            ValidationErrorCode.ASYNC_INDEX_WRONG_PEER,
            "asyncIndex refers to wrong peer",
            asyncIndex=index, id=request["id"],
            found_id=async_peers[index].get("id"),
        )
    return None

