"""
Unit tests for MongoConnection with a mocked Motor client.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import ServerSelectionTimeoutError

from user_service.domain.exceptions import StorageError
from user_service.infrastructure.db.mongo_connection import MongoConnection


@pytest.fixture
def client():
    mock = MagicMock()
    return mock


@pytest.fixture
def connection(client):
    return MongoConnection(client, "test_user_service")


class TestMongoConnection:
    """Tests for MongoConnection"""

    def test_selects_database_and_collection(self, client, connection):
        client.__getitem__.assert_called_once_with("test_user_service")
        connection.get_user_collection()
        connection.database.__getitem__.assert_called_with("users")

    @pytest.mark.asyncio
    async def test_ensure_indexes(self, connection):
        collection = connection.get_user_collection()
        collection.create_index = AsyncMock()

        await connection.ensure_indexes()

        collection.create_index.assert_any_await([("email", ASCENDING)], unique=True)
        collection.create_index.assert_any_await([("created_at", DESCENDING)])

    @pytest.mark.asyncio
    async def test_ensure_indexes_failure_raises_storage_error(self, connection):
        collection = connection.get_user_collection()
        collection.create_index = AsyncMock(side_effect=ServerSelectionTimeoutError("no servers"))

        with pytest.raises(StorageError) as exc_info:
            await connection.ensure_indexes()
        assert exc_info.value.operation == "ensure_indexes"

    def test_close(self, client, connection):
        connection.close()
        client.close.assert_called_once()
