"""
FriendList API: Status and Health Routes
===========================================

What:  GET / (liveness message) and GET /health (MongoDB reachability).
Who:   GET / is the endpoint existing clients poll to see if the API is up;
       /health is for monitoring.

Both always answer 200. The process keeps running when MongoDB is down, so
/health reports the database as disconnected instead of failing.
"""

import logging

from fastapi import APIRouter, Depends

from app import __version__
from app.database import DocumentStore
from app.dependencies import get_store
from app.schemas.common import HealthResponse, StatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/", response_model=StatusResponse, summary="Liveness message")
async def root() -> StatusResponse:
    return StatusResponse(status="The API is awake!")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Pings MongoDB and reports whether the service can serve requests end-to-end.",
)
async def health_check(store: DocumentStore = Depends(get_store)) -> HealthResponse:
    connected = await store.ping()
    if not connected:
        logger.warning("Health check: database %s unreachable", store.database_name)
    return HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
    )
