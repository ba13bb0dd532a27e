"""
FriendList API: Posts Route Handlers
=======================================

What:  POST/GET /posts and GET/PUT/DELETE /posts/{post_id}.
How:   Same shape as the friends routes, backed by PostService.

Note the create endpoint answers a missing title or content with 404, not 400.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from app.database import DocumentStore
from app.dependencies import get_store, json_body, json_request_body
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.post import PostPayload, PostResponse
from app.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["Posts"])


def get_post_service(store: DocumentStore = Depends(get_store)) -> PostService:
    return PostService(store.repository(PostService.collection))


@router.post(
    "",
    status_code=201,
    response_model=PostResponse,
    responses={
        404: {"description": "Missing title or content", "model": ErrorResponse},
        500: {"description": "Save error", "model": ErrorResponse},
    },
    summary="Create a post",
    openapi_extra=json_request_body(PostPayload),
)
async def create_post(
    body: Dict[str, Any] = Depends(json_body),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return await service.create(body)


@router.get(
    "",
    response_model=List[PostResponse],
    responses={500: {"model": ErrorResponse}},
    summary="List all posts",
)
async def list_posts(service: PostService = Depends(get_post_service)) -> List[PostResponse]:
    return await service.list()


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Get a post by id",
)
async def get_post(
    post_id: str,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return await service.get(post_id)


@router.put(
    "/{post_id}",
    status_code=201,
    response_model=PostResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Replace a post's title and content",
    openapi_extra=json_request_body(PostPayload),
)
async def update_post(
    post_id: str,
    body: Dict[str, Any] = Depends(json_body),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return await service.update(post_id, body)


@router.delete(
    "/{post_id}",
    status_code=201,
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Delete a post",
)
async def delete_post(
    post_id: str,
    service: PostService = Depends(get_post_service),
) -> MessageResponse:
    return await service.delete(post_id)
