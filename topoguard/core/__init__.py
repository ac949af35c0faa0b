"""Core Layer — pure validation of cluster topology state, no IO, no async.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All validators are pure and deterministic (time is injectable)
    - Expected validation failures are returned as values, never raised

Design Decisions:
    - Functional core separated from imperative shell: the orchestrator and the
      HTTP layer decide what a failure means, the core only reports it
"""
