"""Process entry point — `python -m todo_service` or the `todo-service` script.

Binds uvicorn to settings.host:settings.port (127.0.0.1:8080 by default).
"""

import uvicorn

from todo_service.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "todo_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
