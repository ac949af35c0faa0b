"""Domain Types — enums shared by the validators, the shell, and the HTTP layer.

Invariants:
    - All valid roles and failure codes encoded as Enums — no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (error dicts go over HTTP)
"""

from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class PromoteRole(str, Enum):
    """Roles a peer can be promoted from. ASYNC requires an asyncIndex."""
    SYNC = "sync"
    ASYNC = "async"


class FailureKind(str, Enum):
    """Top-level failure taxonomy."""
    SCHEMA_VIOLATION = "schema_violation"
    INVARIANT_VIOLATION = "invariant_violation"


class ValidationErrorCode(str, Enum):
    """Every reason a snapshot can be rejected."""
    SCHEMA_VIOLATION = "SCHEMA_VIOLATION"
    SYNC_REQUIRED = "SYNC_REQUIRED"
    INVALID_WAL_POSITION = "INVALID_WAL_POSITION"
    EXPIRE_TIME_UNPARSEABLE = "EXPIRE_TIME_UNPARSEABLE"
    GENERATION_MISMATCH = "GENERATION_MISMATCH"
    PROMOTE_EXPIRED = "PROMOTE_EXPIRED"
    ASYNC_INDEX_MISSING = "ASYNC_INDEX_MISSING"
    ASYNC_INDEX_OUT_OF_RANGE = "ASYNC_INDEX_OUT_OF_RANGE"
    ASYNC_INDEX_WRONG_PEER = "ASYNC_INDEX_WRONG_PEER"
    ROLE_MISMATCH = "ROLE_MISMATCH"
