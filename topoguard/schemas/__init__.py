"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas describe the HTTP surface only; state shapes live in core/state_schemas

Design Decisions:
    - Separate from core schemas: API contracts change independently of snapshot shapes
"""
