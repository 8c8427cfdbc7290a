"""Error Hierarchy — typed, categorized exceptions for Todo Service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are 400-level; anything else surfaces as 500
    - to_response() produces the REST envelope
    - TodoNotFoundError.message is exactly "Todo with id {id} not found"

Design Decisions:
    - Single hierarchy with TodoServiceError base: one FastAPI handler catches all
    - Core raises, api/error_handlers.py decides how each error is rendered
"""

from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class TodoServiceError(Exception):
    """Base exception for all Todo Service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.timestamp = datetime.now(timezone.utc)

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.timestamp.isoformat(),
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class TodoNotFoundError(TodoServiceError):
    """No todo with the requested id exists."""
    def __init__(self, todo_id: str):
        super().__init__(
            f"Todo with id {todo_id} not found",
            "TODO_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.todo_id = todo_id
