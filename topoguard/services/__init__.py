"""Services Layer — imperative shell around the pure validators.

Invariants:
    - Services call core validators and log outcomes; they never re-implement a rule
    - Failures stay values here; only api/ turns them into exceptions

Design Decisions:
    - One module per intake path for locality
"""
