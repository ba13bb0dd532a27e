"""
FriendList API: Document Store Access
========================================

What:  The MongoDB client, per-collection repositories, and the abstract
       interfaces the services are written against.
Why:   Centralizes all driver calls and driver-error translation in one place.
       Services never import pymongo.
How:   MongoStore owns a single pymongo AsyncMongoClient for the process and
       hands out MongoRepository objects, one per collection. Every driver
       failure is re-raised as StoreError.
Who:   Constructed once by create_app() and stored on app.state; services
       receive a repository through FastAPI dependencies.
When:  Client created at startup, pinged in the lifespan, closed at shutdown.

Repository contract:
    insert(document)              → stored document, including "_id"
    find_all()                    → list of documents, store-native order
    find_by_id(id)                → document, or None when nothing matches
    update_by_id(id, fields)      → document after the update, or None
    delete_by_id(id)              → deleted document, or None

    "Nothing matches" is a normal result (None), not an error. A malformed
    id is a StoreError, the same as any other failed driver call.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import AsyncMongoClient, ReturnDocument
from pymongo.errors import PyMongoError

from app.exceptions import StoreError

logger = logging.getLogger(__name__)

Document = Dict[str, Any]


class DocumentRepository(ABC):
    """Async CRUD over one collection of schema-flexible documents."""

    name: str

    @abstractmethod
    async def insert(self, document: Document) -> Document:
        ...

    @abstractmethod
    async def find_all(self) -> List[Document]:
        ...

    @abstractmethod
    async def find_by_id(self, document_id: str) -> Optional[Document]:
        ...

    @abstractmethod
    async def update_by_id(self, document_id: str, fields: Document) -> Optional[Document]:
        ...

    @abstractmethod
    async def delete_by_id(self, document_id: str) -> Optional[Document]:
        ...


class DocumentStore(ABC):
    """
    The process-wide store connection.

    Implementations: MongoStore (production) and the in-memory store used by
    the test suite.
    """

    database_name: str

    @abstractmethod
    def repository(self, collection: str) -> DocumentRepository:
        """Return the repository for a named collection."""
        ...

    @abstractmethod
    async def connect(self) -> None:
        """
        Verify the store is reachable.

        Raises:
            StoreError: The store could not be reached.
        """
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """Lightweight connectivity check for /health. Never raises."""
        ...

    @abstractmethod
    async def close(self) -> None:
        ...


# ══════════════════════════════════════════════════════════════════════════
# MongoDB Implementation
# ══════════════════════════════════════════════════════════════════════════

class MongoRepository(DocumentRepository):
    """
    DocumentRepository backed by a pymongo async collection.

    Updates use $set with the validated field set, so all resource fields are
    replaced while "_id" is preserved.
    """

    def __init__(self, collection: Any):
        self._collection = collection
        self.name = collection.name

    def _object_id(self, document_id: str) -> ObjectId:
        try:
            return ObjectId(document_id)
        except (InvalidId, TypeError) as e:
            raise StoreError(
                message=f"'{document_id}' is not a valid document id",
                context={
                    "collection": self.name,
                    "document_id": document_id,
                    "error_type": type(e).__name__,
                },
            )

    def _store_error(self, operation: str, exc: Exception, document_id: Optional[str] = None) -> StoreError:
        context = {
            "collection": self.name,
            "operation": operation,
            "error_type": type(exc).__name__,
            "error": str(exc),
        }
        if document_id is not None:
            context["document_id"] = document_id
        return StoreError(message=f"MongoDB {operation} failed", context=context)

    async def insert(self, document: Document) -> Document:
        stored = dict(document)
        try:
            result = await self._collection.insert_one(stored)
        except PyMongoError as e:
            raise self._store_error("insert", e)
        stored["_id"] = result.inserted_id
        return stored

    async def find_all(self) -> List[Document]:
        try:
            cursor = self._collection.find({})
            return await cursor.to_list(length=None)
        except PyMongoError as e:
            raise self._store_error("find", e)

    async def find_by_id(self, document_id: str) -> Optional[Document]:
        oid = self._object_id(document_id)
        try:
            return await self._collection.find_one({"_id": oid})
        except PyMongoError as e:
            raise self._store_error("find_one", e, document_id)

    async def update_by_id(self, document_id: str, fields: Document) -> Optional[Document]:
        oid = self._object_id(document_id)
        try:
            return await self._collection.find_one_and_update(
                {"_id": oid},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise self._store_error("update", e, document_id)

    async def delete_by_id(self, document_id: str) -> Optional[Document]:
        oid = self._object_id(document_id)
        try:
            return await self._collection.find_one_and_delete({"_id": oid})
        except PyMongoError as e:
            raise self._store_error("delete", e, document_id)


class MongoStore(DocumentStore):
    """
    Owns the single AsyncMongoClient for the process.

    The client connects lazily; constructing a MongoStore never touches the
    network. connect() issues a ping so startup can report reachability.
    """

    def __init__(
        self,
        url: str,
        database_name: str,
        server_selection_timeout_ms: int = 5000,
    ):
        self.url = url
        self.database_name = database_name
        self._client: AsyncMongoClient = AsyncMongoClient(
            url,
            serverSelectionTimeoutMS=server_selection_timeout_ms,
            connect=False,
        )
        self._database = self._client[database_name]

    def repository(self, collection: str) -> MongoRepository:
        return MongoRepository(self._database[collection])

    async def connect(self) -> None:
        try:
            await self._client.admin.command("ping")
        except PyMongoError as e:
            raise StoreError(
                message="Database Connection Failed",
                context={
                    "database": self.database_name,
                    "error_type": type(e).__name__,
                    "error": str(e),
                },
            )

    async def ping(self) -> bool:
        try:
            await self.connect()
        except StoreError as e:
            logger.warning("MongoDB ping failed: %s", e.context.get("error", e.message))
            return False
        return True

    async def close(self) -> None:
        await self._client.close()
