"""
FriendList API: Friends Route Handlers
=========================================

What:  POST/GET /friends and GET/PUT/DELETE /friends/{friend_id}.
How:   Reads the JSON body and path id, delegates to FriendService, returns
       the success status. Failures are raised by the service and turned into
       responses by the global exception handlers in main.py.

Success codes:
    POST   → 201 created record
    GET    → 200 record / array
    PUT    → 201 updated record
    DELETE → 201 {"message": "Friend has been deleted"}
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from app.database import DocumentStore
from app.dependencies import get_store, json_body, json_request_body
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.friend import FriendPayload, FriendResponse
from app.services.friend_service import FriendService

router = APIRouter(prefix="/friends", tags=["Friends"])


def get_friend_service(store: DocumentStore = Depends(get_store)) -> FriendService:
    return FriendService(store.repository(FriendService.collection))


@router.post(
    "",
    status_code=201,
    response_model=FriendResponse,
    responses={400: {"description": "Missing fields, invalid age, or save error", "model": ErrorResponse}},
    summary="Create a friend",
    openapi_extra=json_request_body(FriendPayload),
)
async def create_friend(
    body: Dict[str, Any] = Depends(json_body),
    service: FriendService = Depends(get_friend_service),
) -> FriendResponse:
    return await service.create(body)


@router.get(
    "",
    response_model=List[FriendResponse],
    responses={500: {"model": ErrorResponse}},
    summary="List all friends",
)
async def list_friends(service: FriendService = Depends(get_friend_service)) -> List[FriendResponse]:
    return await service.list()


@router.get(
    "/{friend_id}",
    response_model=FriendResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Get a friend by id",
)
async def get_friend(
    friend_id: str,
    service: FriendService = Depends(get_friend_service),
) -> FriendResponse:
    return await service.get(friend_id)


@router.put(
    "/{friend_id}",
    status_code=201,
    response_model=FriendResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Replace a friend's fields",
    description="Takes the same body as create. An incomplete or invalid body is answered with 500.",
    openapi_extra=json_request_body(FriendPayload),
)
async def update_friend(
    friend_id: str,
    body: Dict[str, Any] = Depends(json_body),
    service: FriendService = Depends(get_friend_service),
) -> FriendResponse:
    return await service.update(friend_id, body)


@router.delete(
    "/{friend_id}",
    status_code=201,
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Delete a friend",
)
async def delete_friend(
    friend_id: str,
    service: FriendService = Depends(get_friend_service),
) -> MessageResponse:
    return await service.delete(friend_id)
