"""
FriendList API: Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the three ways a request can fail.
Why:   Services decide WHAT went wrong and which status code the endpoint uses;
       global handlers in main.py turn that into a JSON response.
How:   Each exception carries a message, an optional context dict (logged,
       never returned) and the HTTP status code for the endpoint that raised it.
Who:   Raised by services and the MongoDB repository; caught by global handlers.

Exception Hierarchy:
    FriendListError (base)
    ├── ValidationError   → 400 by default (client can fix the payload)
    ├── NotFoundError     → 404 (no record with that id)
    └── StoreError        → 500 by default (MongoDB operation failed)

Status codes are per-instance rather than per-class because the endpoints do
not agree with each other: a missing post field is answered with 404, every
failed update validation with 500, and a failed friend save with 400. Clients
already depend on those codes, so each raise site passes the one it needs.

Every error response body has the same shape:
    {"errorMessage": "<human-readable message>"}
"""

from typing import Any, Dict, Optional


class FriendListError(Exception):
    """
    Base exception for all FriendList application errors.

    Attributes:
        message:      User-facing error description (returned in the response)
        context:      Additional debug info (logged but NOT returned to client)
        status_code:  HTTP status the global handler responds with
    """

    default_status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.context = context or {}
        self.status_code = status_code or self.default_status_code
        super().__init__(self.message)


class ValidationError(FriendListError):
    """
    Raised when a request payload fails presence or range checks.

    Detected before any store access, so nothing has been written when this
    is raised.
    """

    default_status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        ctx = dict(context or {})
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx, status_code=status_code)
        self.field = field


class NotFoundError(FriendListError):
    """
    Raised when no record matches the requested id.

    The driver returns None for a well-formed id with no document; the service
    layer converts that None into this exception.
    """

    default_status_code = 404

    def __init__(
        self,
        message: str = "The requested resource was not found",
        resource: Optional[str] = None,
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        if resource:
            ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class StoreError(FriendListError):
    """
    Raised when a MongoDB operation fails.

    Covers lost connectivity, server selection timeouts, write errors and
    malformed ObjectIds. The driver's own error text goes into `context` for
    the server log; the client only sees `message`.
    """

    default_status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message=message, context=context, status_code=status_code)

    def with_response(self, message: str, status_code: Optional[int] = None) -> "StoreError":
        """Copy of this error re-worded for a specific endpoint, same context."""
        return StoreError(
            message=message,
            context=dict(self.context),
            status_code=status_code,
        )
