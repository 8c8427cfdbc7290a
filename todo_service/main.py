"""Todo Service API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TodoServiceError → 404 text / JSON envelopes
    - CORS configured from settings (not hardcoded)
    - Each app owns one TodoStore on app.state, attached before any request

Design Decisions:
    - create_app() factory: tests build an isolated app (and store) per test
    - Store attached in create_app, not in lifespan: ASGI test transports that
      skip lifespan still see a ready store
    - Lifespan over @app.on_event for logging setup and start/stop logs
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_service.api.error_handlers import register_error_handlers
from todo_service.api.routes import health, todos
from todo_service.config import get_settings
from todo_service.core.todo_store import TodoStore
from todo_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Todo Service started")
    yield
    logger.info(
        "Todo Service shutting down",
        extra={"todo_count": len(app.state.todo_store)},
    )


def create_app(store: TodoStore | None = None) -> FastAPI:
    """Build the FastAPI app around an explicitly constructed TodoStore."""
    settings = get_settings()
    app = FastAPI(
        title="Todo Service API", version=settings.service_version,
        lifespan=lifespan,
    )
    app.state.todo_store = store if store is not None else TodoStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(todos.router)

    register_error_handlers(app)
    return app


app = create_app()
