"""MongoDB Connection Manager — one motor client per process, pinged at startup.

Invariants:
    - A single AsyncIOMotorClient is created at startup and reused by every request
    - serverSelectionTimeoutMS bounds every wait on the server (startup fails, never hangs)
    - Missing MONGODB_URI → ConfigurationError; unreachable server → StorageError,
      both raised before the HTTP server binds

Design Decisions:
    - Manager object returned to the caller, not a module singleton: the lifespan
      and the CLI each own the connection they open
    - ping on connect: motor connects lazily, so without it a bad URI only shows
      up on the first request
"""

import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from phonebook.config import Settings
from phonebook.core.errors import ConfigurationError, StorageError

logger = logging.getLogger(__name__)


class MongoManager:
    """Owns the motor client and hands out the persons collection."""

    def __init__(
        self,
        uri: str,
        database: str,
        collection: str,
        timeout_ms: int = 5000,
    ):
        self.client = AsyncIOMotorClient(
            uri, serverSelectionTimeoutMS=timeout_ms,
        )
        self._database = database
        self._collection = collection

    @property
    def collection(self) -> AsyncIOMotorCollection:
        return self.client[self._database][self._collection]

    async def connect(self) -> None:
        """Ping the server; close the client and raise if it does not answer."""
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            self.client.close()
            logger.error(f"MongoDB connection error: {e}")
            raise StorageError(str(e), "connect") from e
        logger.info(
            "Connected to MongoDB",
            extra={"operation": "connect"},
        )

    def close(self) -> None:
        logger.info("Closing MongoDB connection")
        self.client.close()


async def open_mongo(settings: Settings) -> MongoManager:
    """Build and connect a MongoManager from settings."""
    if not settings.mongodb_uri:
        logger.error("MONGODB_URI is missing! Check your environment or .env file.")
        raise ConfigurationError("MONGODB_URI")
    manager = MongoManager(
        settings.mongodb_uri,
        settings.mongodb_database,
        settings.mongodb_collection,
        timeout_ms=settings.mongodb_timeout_ms,
    )
    await manager.connect()
    return manager
