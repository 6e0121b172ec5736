"""
Base repository with generic CRUD operations for MongoDB.
All entity-specific repositories should inherit from this.
"""
from typing import Optional, List, Dict, Any, Tuple
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from datetime import datetime, timezone
import logging

from employee_api.utils.logger import log_database_operation

logger = logging.getLogger(__name__)

CREATED_FIELD = "createdAt"
UPDATED_FIELD = "updatedAt"
REVISION_FIELD = "__v"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_object_id(doc_id: Any) -> ObjectId:
    return ObjectId(doc_id) if isinstance(doc_id, str) else doc_id


def serialize_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Replace the ObjectId ``_id`` with a string ``id`` field."""
    if document and '_id' in document:
        document['id'] = str(document.pop('_id'))
    return document


class BaseRepository:
    """
    Generic repository for MongoDB CRUD operations.

    Provides standard methods: create, find_by_id, find_all, update, delete, etc.
    Store errors are never swallowed here; callers decide how to report them.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        """
        Initialize repository with MongoDB collection.

        Args:
            collection: Motor AsyncIOMotorCollection instance
        """
        self.collection = collection

    async def create(self, document: Dict[str, Any]) -> str:
        """
        Create a new document.

        Timestamps and the revision counter are stamped by the server side
        of the application, never taken from the caller.

        Args:
            document: Document data

        Returns:
            str: Created document ID
        """
        now = utcnow()
        document[CREATED_FIELD] = now
        document[UPDATED_FIELD] = now
        document[REVISION_FIELD] = 0

        result = await self.collection.insert_one(document)
        logger.info(f"Created document in {self.collection.name}: {result.inserted_id}")
        return str(result.inserted_id)

    async def find_by_id(
        self,
        doc_id: str,
        projection: Optional[Dict[str, int]] = None
    ) -> Optional[Dict[str, Any]]:
        """
        Find document by ID.

        Args:
            doc_id: Document ID (string or ObjectId), already validated
            projection: Optional MongoDB projection

        Returns:
            Document data or None if not found
        """
        log_database_operation(logger, "find_by_id", self.collection.name, str(doc_id))
        document = await self.collection.find_one({"_id": to_object_id(doc_id)}, projection)
        return serialize_document(document)

    async def find_all(
        self,
        projection: Optional[Dict[str, int]] = None,
        sort: Optional[List[Tuple[str, int]]] = None
    ) -> List[Dict[str, Any]]:
        """
        Find all documents in the collection.

        Args:
            projection: Optional MongoDB projection
            sort: List of (field, direction) tuples for sorting

        Returns:
            List of documents
        """
        log_database_operation(logger, "find_all", self.collection.name)
        cursor = self.collection.find({}, projection)

        if sort:
            cursor = cursor.sort(sort)

        documents = await cursor.to_list(length=None)

        return [serialize_document(doc) for doc in documents]

    async def exists(self, filter_query: Dict[str, Any]) -> bool:
        """
        Check if document exists matching filter.

        Args:
            filter_query: MongoDB filter query

        Returns:
            True if exists, False otherwise
        """
        count = await self.collection.count_documents(filter_query, limit=1)
        return count > 0

    async def update(
        self,
        doc_id: str,
        update_data: Dict[str, Any]
    ) -> Tuple[int, int]:
        """
        Update document by ID, refreshing its update timestamp.

        Args:
            doc_id: Document ID
            update_data: Fields to set

        Returns:
            (matched_count, modified_count) as reported by the store
        """
        update_data[UPDATED_FIELD] = utcnow()

        result = await self.collection.update_one(
            {"_id": to_object_id(doc_id)},
            {"$set": update_data}
        )

        if result.modified_count > 0:
            logger.info(f"Updated document in {self.collection.name}: {doc_id}")

        return result.matched_count, result.modified_count

    async def delete(self, doc_id: str) -> int:
        """
        Delete document by ID.

        Args:
            doc_id: Document ID

        Returns:
            Number of documents deleted (0 or 1)
        """
        result = await self.collection.delete_one({"_id": to_object_id(doc_id)})

        if result.deleted_count > 0:
            logger.info(f"Deleted document from {self.collection.name}: {doc_id}")

        return result.deleted_count
