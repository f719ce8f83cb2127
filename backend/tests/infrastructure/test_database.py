"""MongoDB startup — missing configuration and unreachable server fail fast."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from phonebook.config import Settings
from phonebook.core.errors import ConfigurationError, StorageError
from phonebook.infrastructure import database
from phonebook.infrastructure.database import open_mongo


@pytest.fixture
def fake_client(monkeypatch):
    client = MagicMock()
    client.admin.command = AsyncMock(return_value={"ok": 1})
    factory = MagicMock(return_value=client)
    monkeypatch.setattr(database, "AsyncIOMotorClient", factory)
    return factory, client


async def test_missing_uri_is_configuration_error(fake_client):
    factory, _ = fake_client
    with pytest.raises(ConfigurationError):
        await open_mongo(Settings(_env_file=None, mongodb_uri=None))
    factory.assert_not_called()


async def test_connect_pings_with_bounded_timeout(fake_client):
    factory, client = fake_client
    settings = Settings(
        _env_file=None, mongodb_uri="mongodb://db0:27017", mongodb_timeout_ms=3000,
    )

    manager = await open_mongo(settings)

    factory.assert_called_once_with(
        "mongodb://db0:27017", serverSelectionTimeoutMS=3000,
    )
    client.admin.command.assert_awaited_once_with("ping")
    assert manager.client is client


async def test_collection_uses_configured_names(fake_client):
    _, client = fake_client
    settings = Settings(
        _env_file=None, mongodb_uri="mongodb://db0:27017",
        mongodb_database="book", mongodb_collection="people",
    )

    manager = await open_mongo(settings)

    assert manager.collection is client["book"]["people"]


async def test_unreachable_server_is_storage_error(fake_client):
    _, client = fake_client
    client.admin.command.side_effect = ServerSelectionTimeoutError("no servers")

    with pytest.raises(StorageError) as exc_info:
        await open_mongo(Settings(_env_file=None, mongodb_uri="mongodb://db0:27017"))

    assert exc_info.value.operation == "connect"
    client.close.assert_called_once()
