"""State Schemas — shape definitions for every object the validators accept.

Invariants:
    - Schemas check shape and primitive types only; semantic rules live in validate_*
    - Keys are the camelCase names the coordination service writes (aliases only;
      Python field names such as init_wal are extras, not substitutes)
    - Unknown keys are allowed (extra="allow") so they survive the copy step
    - Primitive fields are Strict*: "5" is not a generation, 1 is not a bool

Design Decisions:
    - Pydantic models as the schema engine: validation errors already carry
      field locations and messages, surfaced verbatim to the caller
    - TypeAdapters are built once at import time and shared (they are immutable)
    - `promote` is only typed as a mapping here: a malformed operator request
      is rejected by the promotion validator without invalidating the snapshot
"""

from typing import Any, Literal

from pydantic import (
    BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, TypeAdapter,
)


class _StateModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class PeerReference(_StateModel):
    """One cluster member. Only `id` is interpreted."""
    id: StrictStr
    zone_id: StrictStr | None = Field(None, alias="zoneId")
    ip: StrictStr | None = None
    pg_url: StrictStr | None = Field(None, alias="pgUrl")
    backup_url: StrictStr | None = Field(None, alias="backupUrl")


class ClusterState(_StateModel):
    """Coordination-service topology snapshot."""
    generation: StrictInt
    primary: PeerReference | None = None
    sync: PeerReference | None
    async_: list[PeerReference] = Field(alias="async")
    deposed: list[PeerReference]
    init_wal: StrictStr = Field(alias="initWal")
    one_node_write_mode: StrictBool = Field(False, alias="oneNodeWriteMode")
    freeze: StrictBool | dict[str, Any] | None = None
    promote: dict[str, Any] | None = None


class PromotionRequest(_StateModel):
    """Operator request to promote a peer within one generation."""
    role: Literal["sync", "async"]
    id: StrictStr
    generation: StrictInt
    expire_time: StrictStr = Field(alias="expireTime")
    async_index: StrictInt | None = Field(None, alias="asyncIndex")


class ReplicationConnection(_StateModel):
    """One downstream row of pg_stat_replication."""
    application_name: StrictStr | None = None
    client_addr: StrictStr | None = None
    state: StrictStr | None = None
    sync_state: StrictStr | None = None
    sent_lsn: StrictStr | None = None
    write_lsn: StrictStr | None = None
    flush_lsn: StrictStr | None = None
    replay_lsn: StrictStr | None = None


class ReplicationStatus(_StateModel):
    """Replication status reported by the local database."""
    pg_stat_replication: list[ReplicationConnection] = Field(default_factory=list)
    pg_stat_wal_receiver: dict[str, Any] | None = None


# ─── Schema handles passed to the validators ────────────────────

CLUSTER_STATE_SCHEMA = TypeAdapter(ClusterState | None)
PEER_LIST_SCHEMA = TypeAdapter(list[PeerReference])
REPLICATION_STATUS_SCHEMA = TypeAdapter(ReplicationStatus)
PROMOTION_REQUEST_SCHEMA = TypeAdapter(PromotionRequest)
