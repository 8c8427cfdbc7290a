"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes never touch shared state except through TodoStore

Design Decisions:
    - Thin routes delegate to core (functional core, imperative shell)
"""
