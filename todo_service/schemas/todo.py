"""Todo Schemas — Pydantic models for the /todos endpoints.

Invariants:
    - TodoCreate.title / TodoUpdate.title: required str, any content (empty allowed)
    - TodoResponse mirrors the wire shape {"id", "title", "completed"}
    - Unknown request fields are ignored (pydantic default)

Design Decisions:
    - No length/content constraints on title: presence is the only rule
    - Separate create/update models even though identical: each is its own API contract
"""

from pydantic import BaseModel

from todo_service.core.domain_types import Todo


class TodoCreate(BaseModel):
    """Body of POST /todos."""
    title: str


class TodoUpdate(BaseModel):
    """Body of PUT /todos/{id} — only title is mutable."""
    title: str


class TodoResponse(BaseModel):
    """Public-facing todo."""
    id: str
    title: str
    completed: bool

    @classmethod
    def from_domain(cls, todo: Todo) -> "TodoResponse":
        return cls(id=todo.id, title=todo.title, completed=todo.completed)
