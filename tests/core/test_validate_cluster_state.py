"""Cluster-State Validation — tests for snapshot sanitization.

Tests cover:
    - None passes through as a successful None
    - Missing `deposed` is defaulted on the copy, never on the input
    - `sync` may be None only in one-node-write mode
    - `initWal` must parse as a WAL position
    - Schema violations surface the engine's errors
    - Result is an independent copy (idempotent, unknown keys carried)
"""

import copy

from topoguard.core.domain_types import FailureKind, ValidationErrorCode
from topoguard.core.validate_cluster_state import validate_cluster_state
from tests.core.snapshots import make_state, peer


# ─── Null passthrough ────────────────────────────────────────────

def test_none_validates_to_none():
    result = validate_cluster_state(None)
    assert result.ok
    assert result.value is None
    assert result.error is None


# ─── deposed default ─────────────────────────────────────────────

def test_missing_deposed_defaults_to_empty_list():
    state = make_state()
    del state["deposed"]
    result = validate_cluster_state(state)
    assert result.ok
    assert result.value["deposed"] == []


def test_deposed_default_not_applied_to_input():
    state = make_state()
    del state["deposed"]
    validate_cluster_state(state)
    assert "deposed" not in state


def test_existing_deposed_is_kept():
    state = make_state(deposed=[peer("d9")])
    result = validate_cluster_state(state)
    assert result.ok
    assert [p["id"] for p in result.value["deposed"]] == ["d9"]


# ─── sync / one-node-write invariant ─────────────────────────────

def test_null_sync_rejected_outside_one_node_mode():
    result = validate_cluster_state(make_state(sync=None, oneNodeWriteMode=False))
    assert not result.ok
    assert result.error.code == ValidationErrorCode.SYNC_REQUIRED
    assert result.error.kind == FailureKind.INVARIANT_VIOLATION


def test_null_sync_rejected_when_one_node_mode_absent():
    result = validate_cluster_state(make_state(sync=None))
    assert result.error.code == ValidationErrorCode.SYNC_REQUIRED


def test_null_sync_allowed_in_one_node_mode():
    result = validate_cluster_state(
        make_state(sync=None, oneNodeWriteMode=True, **{"async": []}),
    )
    assert result.ok
    assert result.value["sync"] is None


def test_missing_sync_key_is_schema_violation():
    state = make_state()
    del state["sync"]
    result = validate_cluster_state(state)
    assert result.error.kind == FailureKind.SCHEMA_VIOLATION


# ─── initWal ─────────────────────────────────────────────────────

def test_invalid_init_wal_rejected():
    result = validate_cluster_state(make_state(initWal="not-a-wal"))
    assert not result.ok
    assert result.error.code == ValidationErrorCode.INVALID_WAL_POSITION
    assert result.error.details["initWal"] == "not-a-wal"


def test_init_wal_with_trailing_newline_rejected():
    result = validate_cluster_state(make_state(initWal="0/16B7E48\n"))
    assert result.error.code == ValidationErrorCode.INVALID_WAL_POSITION


def test_init_wal_accepts_lowercase_hex():
    assert validate_cluster_state(make_state(initWal="16/b374d848")).ok


# ─── Schema violations ───────────────────────────────────────────

def test_string_generation_is_schema_violation():
    result = validate_cluster_state(make_state(generation="7"))
    assert not result.ok
    assert result.error.code == ValidationErrorCode.SCHEMA_VIOLATION
    assert any(e["loc"] == ("generation",) for e in result.error.details["errors"])


def test_snake_case_init_wal_is_schema_violation():
    state = make_state()
    state["init_wal"] = state.pop("initWal")
    result = validate_cluster_state(state)
    assert not result.ok
    assert result.error.code == ValidationErrorCode.SCHEMA_VIOLATION


def test_snake_case_async_is_schema_violation():
    state = make_state()
    state["async_"] = state.pop("async")
    result = validate_cluster_state(state)
    assert result.error.code == ValidationErrorCode.SCHEMA_VIOLATION


def test_snake_case_one_node_write_mode_is_not_honored():
    result = validate_cluster_state(make_state(sync=None, one_node_write_mode=True))
    assert result.error.code == ValidationErrorCode.SYNC_REQUIRED


def test_missing_async_is_schema_violation():
    state = make_state()
    del state["async"]
    result = validate_cluster_state(state)
    assert result.error.kind == FailureKind.SCHEMA_VIOLATION


def test_peer_without_id_is_schema_violation():
    result = validate_cluster_state(make_state(sync={"zoneId": "z"}))
    assert result.error.kind == FailureKind.SCHEMA_VIOLATION


def test_non_mapping_is_schema_violation():
    result = validate_cluster_state(["generation", 7])
    assert result.error.kind == FailureKind.SCHEMA_VIOLATION


def test_malformed_promote_does_not_invalidate_state():
    result = validate_cluster_state(make_state(promote={"role": "primary"}))
    assert result.ok


# ─── Copy semantics ──────────────────────────────────────────────

def test_validation_is_idempotent():
    first = validate_cluster_state(make_state())
    second = validate_cluster_state(first.value)
    assert second.ok
    assert second.value == first.value


def test_result_is_independent_of_input():
    state = make_state()
    original = copy.deepcopy(state)
    result = validate_cluster_state(state)

    assert result.value is not state
    result.value["async"].append(peer("a9"))
    result.value["sync"]["id"] = "changed"
    assert state == original

    state["primary"]["id"] = "also-changed"
    assert result.value["primary"]["id"] == "p0"


def test_unknown_fields_pass_through():
    state = make_state(freeze={"date": "2024-01-01T00:00:00Z", "reason": "upgrade"})
    state["futureField"] = {"nested": True}
    result = validate_cluster_state(state)
    assert result.ok
    assert result.value["futureField"] == {"nested": True}
    assert result.value["freeze"]["reason"] == "upgrade"
