"""
FriendList API: Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Endpoint tests run against an in-memory document store, so no MongoDB
       server is needed.
How:   create_app(store=...) takes the store as an argument; the fixtures hand
       it an InMemoryStore and talk to the app through httpx's ASGITransport.

Fixtures (function-scoped, fresh for each test):
    ├── memory_store: InMemoryStore with optional failure injection
    ├── test_app / test_client: app bound to memory_store, HTTPX AsyncClient
    ├── mock_collection: MagicMock shaped like a pymongo async collection
    └── friend_data / post_data: valid request bodies
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["MONGO_URL"] = "mongodb://localhost:27017/FriendListTest"
os.environ["MONGO_SERVER_SELECTION_TIMEOUT_MS"] = "200"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import Any, Dict, List, Set
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from bson import ObjectId
from bson.errors import InvalidId
from httpx import ASGITransport, AsyncClient

from app.database import DocumentRepository, DocumentStore
from app.exceptions import StoreError


# ══════════════════════════════════════════════════════════════════════════
# In-Memory Document Store
# ══════════════════════════════════════════════════════════════════════════

class InMemoryRepository(DocumentRepository):
    """
    Dict-backed repository with the same contract as MongoRepository.

    Ids are real ObjectIds, so malformed ids fail the same way. Operation
    names added to `failing` raise StoreError, simulating a lost connection.
    """

    def __init__(self, name: str, failing: Set[str]):
        self.name = name
        self.documents: Dict[ObjectId, Dict[str, Any]] = {}
        self._failing = failing

    def _check(self, operation: str) -> None:
        if operation in self._failing:
            raise StoreError(
                message=f"MongoDB {operation} failed",
                context={"collection": self.name, "operation": operation},
            )

    def _object_id(self, document_id: str) -> ObjectId:
        try:
            return ObjectId(document_id)
        except (InvalidId, TypeError):
            raise StoreError(message=f"'{document_id}' is not a valid document id")

    async def insert(self, document):
        self._check("insert")
        stored = {**document, "_id": ObjectId()}
        self.documents[stored["_id"]] = stored
        return dict(stored)

    async def find_all(self):
        self._check("find")
        return [dict(doc) for doc in self.documents.values()]

    async def find_by_id(self, document_id):
        oid = self._object_id(document_id)
        self._check("find_one")
        doc = self.documents.get(oid)
        return dict(doc) if doc else None

    async def update_by_id(self, document_id, fields):
        oid = self._object_id(document_id)
        self._check("update")
        if oid not in self.documents:
            return None
        self.documents[oid].update(fields)
        return dict(self.documents[oid])

    async def delete_by_id(self, document_id):
        oid = self._object_id(document_id)
        self._check("delete")
        return self.documents.pop(oid, None)


class InMemoryStore(DocumentStore):
    """DocumentStore holding one InMemoryRepository per collection."""

    def __init__(self, reachable: bool = True):
        self.database_name = "FriendListTest"
        self.reachable = reachable
        self.failing: Set[str] = set()
        self.closed = False
        self._repositories: Dict[str, InMemoryRepository] = {}

    def repository(self, collection: str) -> InMemoryRepository:
        if collection not in self._repositories:
            self._repositories[collection] = InMemoryRepository(collection, self.failing)
        return self._repositories[collection]

    def documents(self, collection: str) -> List[Dict[str, Any]]:
        return list(self.repository(collection).documents.values())

    async def connect(self) -> None:
        if not self.reachable:
            raise StoreError(message="Database Connection Failed", context={"error": "unreachable"})

    async def ping(self) -> bool:
        return self.reachable

    async def close(self) -> None:
        self.closed = True


# ══════════════════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def test_app(memory_store):
    from app.main import create_app
    return create_app(store=memory_store)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient routed directly to the app.

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def mock_collection():
    """
    A MagicMock shaped like a pymongo AsyncCollection.

    find() is synchronous and returns a cursor; everything else is awaited.
    """
    collection = MagicMock()
    collection.name = "friends"
    collection.insert_one = AsyncMock()
    collection.find_one = AsyncMock()
    collection.find_one_and_update = AsyncMock()
    collection.find_one_and_delete = AsyncMock()
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[])
    collection.find = MagicMock(return_value=cursor)
    return collection


@pytest.fixture
def friend_data() -> Dict[str, Any]:
    return {"firstName": "Ada", "lastName": "Lovelace", "age": 36}


@pytest.fixture
def post_data() -> Dict[str, Any]:
    return {"postTitle": "Hello", "postContent": "First post on the new API."}


@pytest.fixture
def missing_id() -> str:
    """A well-formed id that matches no document."""
    return str(ObjectId())


@pytest.fixture
def failing_store(memory_store) -> InMemoryStore:
    """memory_store with every operation failing."""
    memory_store.failing.update({"insert", "find", "find_one", "update", "delete"})
    return memory_store


@pytest.fixture
def unreachable_store() -> InMemoryStore:
    """A store whose ping and connect fail, as with MongoDB down at startup."""
    return InMemoryStore(reachable=False)
