"""Validation Routes — expose the validation gate over HTTP for operators and tooling.

Invariants:
    - POST /validate/cluster-state accepts a snapshot or JSON null
    - Rejections are 422 with the structured error envelope (via StateValidationError)
    - Responses carry the sanitized copies, never the request payload itself
"""

from typing import Any

from fastapi import APIRouter, Body

from topoguard.core.errors import ErrorContext, StateValidationError
from topoguard.core.validation_result import ValidationResult
from topoguard.schemas.validation import (
    ClusterStateResponse,
    PeerListResponse,
    PromotionRequestResponse,
    ReplicationStatusResponse,
)
from topoguard.services.state_intake import (
    admit_cluster_snapshot,
    admit_peer_list,
    admit_replication_status,
)

router = APIRouter(prefix="/api/v1/validate", tags=["validate"])


def _require_ok(result: ValidationResult, validator: str) -> Any:
    if not result.ok:
        raise StateValidationError(result.error, ErrorContext(validator=validator))
    return result.value


@router.post("/cluster-state", response_model=ClusterStateResponse)
async def validate_cluster_state_route(payload: Any = Body(None)):
    admitted = _require_ok(admit_cluster_snapshot(payload), "cluster_state")
    return ClusterStateResponse(
        state=admitted.state,
        promote=admitted.promote,
        promote_error=(
            admitted.promote_error.to_dict() if admitted.promote_error else None
        ),
    )


@router.post("/promotion-request", response_model=PromotionRequestResponse)
async def validate_promotion_request_route(payload: Any = Body(None)):
    """Validate the promote request embedded in a snapshot."""
    admitted = _require_ok(admit_cluster_snapshot(payload), "cluster_state")
    if admitted.promote_error is not None:
        raise StateValidationError(
            admitted.promote_error,
            ErrorContext(
                validator="promotion_request",
                generation=admitted.state["generation"],
            ),
        )
    return PromotionRequestResponse(promote=admitted.promote)


@router.post("/peers", response_model=PeerListResponse)
async def validate_peers_route(payload: Any = Body(None)):
    return PeerListResponse(peers=_require_ok(admit_peer_list(payload), "peer_list"))


@router.post("/replication-status", response_model=ReplicationStatusResponse)
async def validate_replication_status_route(payload: Any = Body(None)):
    return ReplicationStatusResponse(
        status=_require_ok(admit_replication_status(payload), "replication_status"),
    )
