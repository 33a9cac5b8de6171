"""
Roster Backend — Custom Exception Hierarchy
============================================

What:  Application-specific exceptions for the failure modes of a request.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON responses with the right HTTP status code.
Who:   Raised by the resolver and route bindings; caught by global handlers.

Exception Hierarchy:
    RosterError (base)
    ├── ModelNotFoundError    → 404 Not Found
    └── InfrastructureError   → 500 Internal Server Error

Resolution failures never travel past the request-handling layer: the
handlers in main.py turn them into responses.
"""

from typing import Any, Dict, Optional


class RosterError(Exception):
    """
    Base exception for all Roster application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ModelNotFoundError(RosterError):
    """
    Raised when a bound route parameter does not resolve to an entity.

    When:    GET /student/{student}/detail with a key that has no row.
    HTTP:    404 Not Found

    Message format:
        No query results for model [Student] 12345

    The format is part of the public API; clients match on it.
    """

    def __init__(
        self,
        model: str,
        key: Any,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.model = model
        self.key = key
        ctx = context or {}
        ctx["model"] = model
        ctx["key"] = str(key)
        super().__init__(
            message=f"No query results for model [{model}] {key}",
            context=ctx,
        )


class InfrastructureError(RosterError):
    """
    Raised when the datastore cannot be reached.

    When:    Connection refused or lost, pool exhausted, driver-level I/O error.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. The original
        driver error is kept in `context` and logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
