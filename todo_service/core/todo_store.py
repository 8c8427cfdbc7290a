"""Todo Store — the in-memory todo collection behind one exclusive lock.

Invariants:
    - Every public method holds self._lock for its entire body (reads included)
    - The lock is never released and reacquired inside one operation
    - Callers only ever receive copies; stored Todo objects never leave the lock
    - Storage order is insertion order; ids are unique by construction (uuid4)
    - No IO while the lock is held

Design Decisions:
    - One coarse threading.Lock over a reader/writer split: hold times are O(n)
      on an in-memory list
    - threading.Lock over asyncio.Lock: methods are sync and never await, so the
      store works from event-loop handlers and threadpool handlers alike
    - Explicitly constructed object, injected into routes (no module-level singleton)
"""

import logging
import threading
import uuid
from dataclasses import replace
from typing import Callable, Iterable

from todo_service.core.domain_types import Todo, TodoId
from todo_service.core.errors import TodoNotFoundError

logger = logging.getLogger(__name__)


def new_todo_id() -> TodoId:
    """128-bit random id; collisions are not checked."""
    return TodoId(str(uuid.uuid4()))


class TodoStore:
    """Thread-safe in-memory collection of todos."""

    def __init__(
        self,
        todos: Iterable[Todo] | None = None,
        id_factory: Callable[[], TodoId] | None = None,
    ):
        self._lock = threading.Lock()
        self._todos: list[Todo] = [replace(t) for t in todos or ()]
        self._id_factory = id_factory or new_todo_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def list_all(self) -> list[Todo]:
        """Snapshot of all todos in storage order."""
        with self._lock:
            return [replace(t) for t in self._todos]

    def get(self, todo_id: str) -> Todo:
        """Return the todo with todo_id or raise TodoNotFoundError."""
        with self._lock:
            return replace(self._todos[self._index(todo_id)])

    def create(self, title: str) -> Todo:
        """Append a new todo with a fresh id and completed=False."""
        with self._lock:
            todo = Todo(id=self._id_factory(), title=title, completed=False)
            self._todos.append(todo)
            count = len(self._todos)
            created = replace(todo)
        logger.info(
            f"Created todo {created.id}",
            extra={"todo_id": created.id, "todo_count": count},
        )
        return created

    def update(self, todo_id: str, title: str) -> Todo:
        """Replace the title in place. completed is left untouched."""
        with self._lock:
            todo = self._todos[self._index(todo_id)]
            todo.title = title
            updated = replace(todo)
        logger.info(f"Updated todo {todo_id}", extra={"todo_id": todo_id})
        return updated

    def delete(self, todo_id: str) -> None:
        """Remove the todo with todo_id or raise TodoNotFoundError."""
        with self._lock:
            del self._todos[self._index(todo_id)]
            count = len(self._todos)
        logger.info(
            f"Deleted todo {todo_id}",
            extra={"todo_id": todo_id, "todo_count": count},
        )

    # ─── Internals (caller must hold self._lock) ─────────────────

    def _index(self, todo_id: str) -> int:
        for i, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return i
        raise TodoNotFoundError(todo_id)
