"""
NoteKeeper Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the ways a note request can fail.
How:   Each exception carries a client-facing message and an optional context
       dict. Global exception handlers (registered in main.py) catch these and
       return `{"error": <message>}` with the matching HTTP status code.
Who:   Raised by the note service; caught by global handlers.

Exception Hierarchy:
    NoteKeeperError (base)
    ├── ValidationError          → 400 Bad Request
    ├── NotFoundError            → 404 Not Found
    └── MethodNotAllowedError    → 405 Method Not Allowed

All failures are terminal for the request; nothing is retried.
"""

from typing import Any, Dict, Optional


class NoteKeeperError(Exception):
    """
    Base exception for all NoteKeeper application errors.

    Attributes:
        message:     Client-facing error description (returned as "error")
        context:     Additional debug info (logged but NOT returned to client)
        status_code: HTTP status the global handler responds with
    """

    status_code = 500

    def __init__(
        self,
        message: str = "internal server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NoteKeeperError):
    """
    Raised when client input is invalid.

    When:  Non-numeric note ID in the path, or a client-supplied ID on create.
    HTTP:  400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "invalid input",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NoteKeeperError):
    """
    Raised when a requested note does not exist.

    The store returns None for missing notes; the service converts that into
    this exception so the route layer never checks for None itself.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "note",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message="not found", context=ctx)


class MethodNotAllowedError(NoteKeeperError):
    """Raised when a verb is not supported on a notes path."""

    status_code = 405

    def __init__(
        self,
        method: str = "",
        allowed: Optional[list] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["method"] = method
        super().__init__(message="method not allowed", context=ctx)
        self.allowed = allowed or []
