"""MongoDB Person Repository — PersonRepository over a motor collection.

Invariants:
    - Each write touches exactly one document (or none)
    - PyMongoError never escapes: mapped to StorageError with the operation name,
      except a server-side document validation failure (code 121), which
      becomes PersonValidationError (400)
    - bson.errors.InvalidId is NOT caught here; the HTTP error stage turns it into 400

Design Decisions:
    - No unique index on name: uniqueness is a find-then-insert in the service,
      so concurrent creates of one name can race (accepted)
    - find_one_and_update with ReturnDocument.AFTER: one round-trip for update + read back
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import OperationFailure, PyMongoError

from phonebook.core.domain_types import PersonId
from phonebook.core.errors import PersonValidationError, StorageError
from phonebook.core.repository_protocols import PersonDocument

logger = logging.getLogger(__name__)


DOCUMENT_VALIDATION_FAILURE = 121  # server error code for $jsonSchema rejections


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except OperationFailure as e:
        # insert_one raises WriteError, find_one_and_update a bare OperationFailure
        if e.code != DOCUMENT_VALIDATION_FAILURE:
            logger.error(
                f"MongoDB {operation} error: {e}",
                extra={"operation": operation},
            )
            raise StorageError(str(e), operation) from e
        message = (e.details or {}).get("errmsg") or "Document failed validation"
        logger.warning(
            f"MongoDB rejected document on {operation}: {message}",
            extra={"operation": operation},
        )
        raise PersonValidationError(message) from e
    except PyMongoError as e:
        logger.error(
            f"MongoDB {operation} error: {e}",
            extra={"operation": operation},
        )
        raise StorageError(str(e), operation) from e


class MongoPersonRepository:
    """Person persistence backed by one MongoDB collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self._collection = collection

    async def list_all(self) -> list[PersonDocument]:
        with _storage_errors("find"):
            return await self._collection.find({}).to_list(length=None)

    async def get_by_id(self, person_id: PersonId) -> PersonDocument | None:
        oid = ObjectId(person_id)
        with _storage_errors("find_one"):
            return await self._collection.find_one({"_id": oid})

    async def find_by_name(self, name: str) -> PersonDocument | None:
        with _storage_errors("find_one"):
            return await self._collection.find_one({"name": name})

    async def insert(self, name: str, number: str) -> PersonDocument:
        document = {"name": name, "number": number}
        with _storage_errors("insert"):
            result = await self._collection.insert_one(document)
        document["_id"] = result.inserted_id
        logger.info(
            "Person created",
            extra={"person_id": str(result.inserted_id), "operation": "insert"},
        )
        return document

    async def update_number(
        self, person_id: PersonId, number: str,
    ) -> PersonDocument | None:
        oid = ObjectId(person_id)
        with _storage_errors("update"):
            updated = await self._collection.find_one_and_update(
                {"_id": oid},
                {"$set": {"number": number}},
                return_document=ReturnDocument.AFTER,
            )
        if updated is not None:
            logger.info(
                "Person number updated",
                extra={"person_id": person_id, "operation": "update"},
            )
        return updated

    async def delete_by_id(self, person_id: PersonId) -> bool:
        oid = ObjectId(person_id)
        with _storage_errors("delete"):
            result = await self._collection.delete_one({"_id": oid})
        deleted = result.deleted_count > 0
        if deleted:
            logger.info(
                "Person deleted",
                extra={"person_id": person_id, "operation": "delete"},
            )
        return deleted

    async def count(self) -> int:
        with _storage_errors("count"):
            return await self._collection.count_documents({})

    async def ping(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            await self._collection.database.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"MongoDB health check failed: {e}")
            return False
