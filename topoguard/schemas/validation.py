"""Validation Responses — what the validate endpoints return on success.

Invariants:
    - `valid` is always True in a 2xx body; rejections use the error envelope
    - Returned values are the sanitized copies, never the request payload itself
"""

from typing import Any

from pydantic import BaseModel


class ClusterStateResponse(BaseModel):
    valid: bool = True
    state: dict[str, Any] | None
    promote: dict[str, Any] | None = None
    promote_error: dict[str, Any] | None = None


class PeerListResponse(BaseModel):
    valid: bool = True
    peers: list[dict[str, Any]]


class ReplicationStatusResponse(BaseModel):
    valid: bool = True
    status: dict[str, Any]


class PromotionRequestResponse(BaseModel):
    valid: bool = True
    promote: dict[str, Any] | None
