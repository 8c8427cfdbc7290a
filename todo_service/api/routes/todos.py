"""Todo Routes — CRUD endpoints over the app's TodoStore.

Invariants:
    - Every handler makes exactly one TodoStore call (one lock acquisition)
    - TodoNotFoundError propagates to the global handler (404, plain text)
    - Request bodies are validated by Pydantic before reaching the handler

Design Decisions:
    - Prefix lives on the router, not on each route
    - DELETE returns a bare 204 Response: no body, not even "null"
"""

from fastapi import APIRouter, Depends, Response, status

from todo_service.api.dependencies import get_todo_store
from todo_service.core.todo_store import TodoStore
from todo_service.schemas.todo import TodoCreate, TodoResponse, TodoUpdate

router = APIRouter(prefix="/todos", tags=["todos"])


@router.get("", response_model=list[TodoResponse])
async def list_todos(store: TodoStore = Depends(get_todo_store)):
    """List all todos in storage order."""
    return [TodoResponse.from_domain(t) for t in store.list_all()]


@router.get("/{todo_id}", response_model=TodoResponse)
async def get_todo(todo_id: str, store: TodoStore = Depends(get_todo_store)):
    """Get a single todo."""
    return TodoResponse.from_domain(store.get(todo_id))


@router.post(
    "", response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_todo(
    body: TodoCreate, store: TodoStore = Depends(get_todo_store),
):
    """Create a todo with completed=false."""
    return TodoResponse.from_domain(store.create(body.title))


@router.put("/{todo_id}", response_model=TodoResponse)
async def update_todo(
    todo_id: str, body: TodoUpdate,
    store: TodoStore = Depends(get_todo_store),
):
    """Replace a todo's title."""
    return TodoResponse.from_domain(store.update(todo_id, body.title))


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(todo_id: str, store: TodoStore = Depends(get_todo_store)):
    """Delete a todo."""
    store.delete(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
