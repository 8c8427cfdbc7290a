"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - Reports the current todo count (one lock acquisition)
"""

from fastapi import APIRouter, Depends, status

from todo_service.api.dependencies import get_todo_store
from todo_service.config import get_settings
from todo_service.core.todo_store import TodoStore

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(store: TodoStore = Depends(get_todo_store)):
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.service_version,
        "todos": len(store),
    }
