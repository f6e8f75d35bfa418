"""Core Layer - pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure (random_string excepted: it draws from the random module)

Design Decisions:
    - Functional core separated from imperative shell
"""
