"""
FriendList API: Resource Service Base
========================================

What:  The create/list/get/update/delete workflow shared by friends and posts.
Why:   Both resources follow the same steps and differ only in validation,
       wording, and a few status codes. Subclasses supply those.
How:   Each operation validates first (nothing is written on a bad payload),
       then awaits one repository call. A None result becomes NotFoundError;
       a StoreError is re-worded for the endpoint and re-raised.
Who:   Instantiated per request by route dependencies with the collection's
       repository.

Status codes fixed by existing clients:
    create, invalid payload     create_invalid_status (400 friends, 404 posts)
    create, store failure       create_failed_status  (400 friends, 500 posts)
    update, invalid payload     500
    update/delete success       201
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List

from pydantic import BaseModel

from app.database import DocumentRepository
from app.exceptions import NotFoundError, StoreError
from app.schemas.common import MessageResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceMessages:
    """
    User-facing text for every outcome of one resource.

    `update_not_found` is a format string receiving the requested id.
    """
    create_invalid: str
    create_failed: str
    list_failed: str
    not_found: str
    get_failed: str
    update_invalid: str
    update_not_found: str
    update_failed: str
    delete_not_found: str
    delete_failed: str
    deleted: str


class ResourceService(ABC):
    """
    CRUD orchestration for one collection.

    Subclasses set the class attributes and implement validate().
    """

    collection: str
    resource: str
    messages: ResourceMessages
    response_model: Any

    create_invalid_status = 400
    create_failed_status = 500
    update_invalid_status = 500

    def __init__(self, repository: DocumentRepository):
        self.repository = repository

    @abstractmethod
    def validate(self, body: Dict[str, Any], *, missing_message: str, status_code: int) -> BaseModel:
        """
        Turn a raw JSON body into the resource's typed payload.

        Raises:
            ValidationError: With the given status code.
        """

    async def create(self, body: Dict[str, Any]) -> BaseModel:
        payload = self.validate(
            body,
            missing_message=self.messages.create_invalid,
            status_code=self.create_invalid_status,
        )
        try:
            document = await self.repository.insert(payload.model_dump())
        except StoreError as e:
            raise e.with_response(self.messages.create_failed, self.create_failed_status) from e

        logger.info("%s created: %s", self.resource, document["_id"])
        return self.response_model.from_document(document)

    async def list(self) -> List[BaseModel]:
        try:
            documents = await self.repository.find_all()
        except StoreError as e:
            raise e.with_response(self.messages.list_failed) from e
        return [self.response_model.from_document(doc) for doc in documents]

    async def get(self, document_id: str) -> BaseModel:
        try:
            document = await self.repository.find_by_id(document_id)
        except StoreError as e:
            raise e.with_response(self.messages.get_failed) from e

        if document is None:
            raise NotFoundError(
                message=self.messages.not_found,
                resource=self.resource,
                resource_id=document_id,
            )
        return self.response_model.from_document(document)

    async def update(self, document_id: str, body: Dict[str, Any]) -> BaseModel:
        payload = self.validate(
            body,
            missing_message=self.messages.update_invalid,
            status_code=self.update_invalid_status,
        )
        try:
            document = await self.repository.update_by_id(document_id, payload.model_dump())
        except StoreError as e:
            raise e.with_response(self.messages.update_failed) from e

        if document is None:
            raise NotFoundError(
                message=self.messages.update_not_found.format(id=document_id),
                resource=self.resource,
                resource_id=document_id,
            )
        logger.info("%s updated: %s", self.resource, document_id)
        return self.response_model.from_document(document)

    async def delete(self, document_id: str) -> MessageResponse:
        try:
            document = await self.repository.delete_by_id(document_id)
        except StoreError as e:
            raise e.with_response(self.messages.delete_failed) from e

        if document is None:
            raise NotFoundError(
                message=self.messages.delete_not_found,
                resource=self.resource,
                resource_id=document_id,
            )
        logger.info("%s deleted: %s", self.resource, document_id)
        return MessageResponse(message=self.messages.deleted)
