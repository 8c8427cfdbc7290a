"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, response payloads)
    - Domain types from core/ are converted here, never serialized directly

Design Decisions:
    - Separate from core: schemas are API contracts, core dataclasses are state
"""
