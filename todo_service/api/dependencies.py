"""Route Dependencies — hands the app-scoped TodoStore to request handlers.

Invariants:
    - The store is read from request.app.state, set once by create_app()
    - No module-level store: each app instance owns exactly one TodoStore
"""

from fastapi import Request

from todo_service.core.todo_store import TodoStore


def get_todo_store(request: Request) -> TodoStore:
    """FastAPI dependency for the todo store."""
    return request.app.state.todo_store
