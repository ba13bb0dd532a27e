"""
FriendList API: MongoDB Repository Tests (Mocked Driver)
===========================================================

What:  Tests for MongoRepository and MongoStore with the pymongo collection
       and client replaced by mocks.
Why:   The repository is where driver errors and malformed ids become
       StoreError; that translation must hold without a running mongod.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import AutoReconnect, ServerSelectionTimeoutError, WriteError

from app.database import MongoRepository, MongoStore
from app.exceptions import StoreError


class TestMongoRepository:

    @pytest.mark.asyncio
    async def test_insert_returns_document_with_id(self, mock_collection, friend_data):
        oid = ObjectId()
        mock_collection.insert_one.return_value = MagicMock(inserted_id=oid)
        repo = MongoRepository(mock_collection)

        stored = await repo.insert(friend_data)

        assert stored == {**friend_data, "_id": oid}
        assert "_id" not in friend_data

    @pytest.mark.asyncio
    async def test_find_all_reads_whole_cursor(self, mock_collection):
        docs = [{"_id": ObjectId(), "postTitle": "a", "postContent": "b"}]
        mock_collection.find.return_value.to_list.return_value = docs
        repo = MongoRepository(mock_collection)

        assert await repo.find_all() == docs
        mock_collection.find.assert_called_once_with({})
        mock_collection.find.return_value.to_list.assert_awaited_once_with(length=None)

    @pytest.mark.asyncio
    async def test_find_by_id_queries_object_id(self, mock_collection):
        oid = ObjectId()
        mock_collection.find_one.return_value = None
        repo = MongoRepository(mock_collection)

        assert await repo.find_by_id(str(oid)) is None
        mock_collection.find_one.assert_awaited_once_with({"_id": oid})

    @pytest.mark.asyncio
    async def test_update_sets_fields_and_returns_after(self, mock_collection, friend_data):
        oid = ObjectId()
        repo = MongoRepository(mock_collection)

        await repo.update_by_id(str(oid), friend_data)

        mock_collection.find_one_and_update.assert_awaited_once_with(
            {"_id": oid},
            {"$set": friend_data},
            return_document=ReturnDocument.AFTER,
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_id", ["abc", "12345", "zzzzzzzzzzzzzzzzzzzzzzzz"])
    async def test_malformed_id_raises_store_error(self, mock_collection, bad_id):
        repo = MongoRepository(mock_collection)

        with pytest.raises(StoreError) as info:
            await repo.delete_by_id(bad_id)

        assert info.value.context["document_id"] == bad_id
        assert info.value.status_code == 500
        mock_collection.find_one_and_delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_driver_errors_become_store_errors(self, mock_collection, friend_data):
        mock_collection.insert_one.side_effect = WriteError("duplicate key", code=11000)
        mock_collection.find.return_value.to_list.side_effect = AutoReconnect("lost")
        repo = MongoRepository(mock_collection)

        with pytest.raises(StoreError) as insert_info:
            await repo.insert(friend_data)
        with pytest.raises(StoreError) as find_info:
            await repo.find_all()

        assert insert_info.value.context["operation"] == "insert"
        assert insert_info.value.context["error_type"] == "WriteError"
        assert insert_info.value.context["collection"] == "friends"
        assert find_info.value.context["error_type"] == "AutoReconnect"


class TestMongoStore:

    def _store(self, client):
        with patch("app.database.AsyncMongoClient", return_value=client) as factory:
            store = MongoStore("mongodb://db.example/FriendList", "FriendList", 250)
        factory.assert_called_once_with(
            "mongodb://db.example/FriendList",
            serverSelectionTimeoutMS=250,
            connect=False,
        )
        return store

    @pytest.mark.asyncio
    async def test_connect_pings_admin(self):
        client = MagicMock()
        client.admin.command = AsyncMock(return_value={"ok": 1})
        store = self._store(client)

        await store.connect()

        client.admin.command.assert_awaited_once_with("ping")
        assert await store.ping() is True

    @pytest.mark.asyncio
    async def test_unreachable_server(self):
        client = MagicMock()
        client.admin.command = AsyncMock(side_effect=ServerSelectionTimeoutError("no servers"))
        store = self._store(client)

        with pytest.raises(StoreError) as info:
            await store.connect()
        assert info.value.message == "Database Connection Failed"
        assert await store.ping() is False

    @pytest.mark.asyncio
    async def test_close_closes_client(self):
        client = MagicMock()
        client.close = AsyncMock()
        store = self._store(client)

        await store.close()

        client.close.assert_awaited_once()

    def test_repository_uses_named_collection(self):
        client = MagicMock()
        store = self._store(client)

        repo = store.repository("posts")

        client.__getitem__.assert_called_with("FriendList")
        client.__getitem__.return_value.__getitem__.assert_called_with("posts")
        assert isinstance(repo, MongoRepository)
