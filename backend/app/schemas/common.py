"""
FriendList API: Shared Response Schemas and Payload Checks
=============================================================

What:  Response models used by more than one resource, plus the field checks
       both resources share.
Why:   Every error has the same body; every delete answers with the same
       confirmation shape.
"""

from typing import Any, Dict, Iterable, List

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Error format for all API errors.

    Example:
        {"errorMessage": "Age must be a whole number between 1 and 120"}
    """
    errorMessage: str = Field(description="Human-readable error description")


class MessageResponse(BaseModel):
    """Confirmation body returned by the delete endpoints."""
    message: str = Field(description="Human-readable confirmation")


class StatusResponse(BaseModel):
    """Returned by GET / to show the process is up."""
    status: str = Field(description="Liveness message")


class HealthResponse(BaseModel):
    """
    What:  Service status including MongoDB reachability.
    Who:   Returned by GET /health for monitoring.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="MongoDB connectivity: connected, disconnected")


def missing_fields(body: Dict[str, Any], fields: Iterable[str]) -> List[str]:
    """
    Names of required fields that are absent or falsy in the body.

    Falsy counts as missing: "", 0, null, false and empty containers all fail
    the presence check, exactly like an absent key.
    """
    return [name for name in fields if not body.get(name)]


def non_text_fields(body: Dict[str, Any], fields: Iterable[str]) -> List[str]:
    """Names of fields whose value is present but not a string."""
    return [name for name in fields if not isinstance(body.get(name), str)]
