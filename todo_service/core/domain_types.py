"""Domain Types — the Todo record and its identity type.

Invariants:
    - TodoId wraps str — ids are opaque, compared by equality only
    - Todo.id never changes after creation
    - Todo.completed starts False and no operation sets it

Design Decisions:
    - NewType over dataclass wrapper for ids: zero runtime cost, type-checker support
    - Todo as plain dataclass: core stays free of pydantic (schemas/ owns the wire shape)
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TodoId = NewType("TodoId", str)


# ─── Entities ────────────────────────────────────────────────────

@dataclass
class Todo:
    """A single todo item as held by the store."""
    id: TodoId
    title: str
    completed: bool = False
