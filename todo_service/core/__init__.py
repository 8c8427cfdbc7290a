"""Core Layer — pure domain logic, no HTTP, no async.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Shared state lives only inside TodoStore, behind its lock

Design Decisions:
    - Functional core separated from imperative shell: routes stay thin
"""
