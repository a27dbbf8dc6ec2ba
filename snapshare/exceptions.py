"""
Application exceptions.

Services raise these; handlers registered in main.py turn them into
JSON responses:

    SnapShareError (base)
    ├── NotFoundError            → 404 {"message": ...}
    └── InvalidCredentialsError  → 401 {"message": ...}

Storage faults are not wrapped: sqlalchemy.exc.SQLAlchemyError reaches
its own handler and becomes 500 {"error": <driver message>}.
"""
from typing import Any, Dict, Optional


class SnapShareError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message: Client-facing description, returned in the response body
        context: Extra detail for logs only
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(SnapShareError):
    """
    Raised when no row matches an identifier, or a relationship filter
    matches nothing.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource: Optional[str] = None,
        resource_id: Optional[int] = None,
    ):
        ctx: Dict[str, Any] = {}
        if resource:
            ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class InvalidCredentialsError(SnapShareError):
    """Raised when login fails, whatever the reason."""

    def __init__(self, message: str = "Invalid credentials."):
        super().__init__(message=message)
