"""
FriendList API: Route Dependencies
=====================================

What:  FastAPI dependencies shared by the resource routes.
Why:   The store lives on app.state (injected by create_app), and request
       bodies are read without FastAPI's automatic 422 validation, because
       each endpoint answers a bad payload with its own status and message.
"""

import logging
from typing import Any, Dict

from fastapi import Request

from app.database import DocumentStore

logger = logging.getLogger(__name__)


def get_store(request: Request) -> DocumentStore:
    """The DocumentStore passed to create_app()."""
    return request.app.state.store


async def json_body(request: Request) -> Dict[str, Any]:
    """
    The request body as a JSON object.

    An empty body, malformed JSON, or any JSON value that is not an object
    becomes an empty dict, which then fails the missing-fields check with the
    endpoint's usual message.
    """
    try:
        data = await request.json()
    except ValueError:
        logger.debug("Request body is not valid JSON; treating it as empty")
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def json_request_body(model: Any) -> Dict[str, Any]:
    """openapi_extra entry documenting a body that json_body() reads by hand."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }
