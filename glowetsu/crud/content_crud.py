from datetime import datetime, timezone
from typing import Any, Dict, Optional
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError


from glowetsu.utils.logger_utils import get_logger


logger = get_logger(__name__)


class ContentCRUD:
    """
    Class for managing singleton content documents in MongoDB.

    Each collection holds one document stored under a fixed, well-known key.
    """
    async def get(
        self, db: AsyncIOMotorDatabase, collection: str, key: str
    ) -> Optional[Dict[str, Any]]:
        """
        Retrieve the singleton document of a collection.

        Args:
            db: MongoDB database instance
            collection: Collection name
            key: Fixed document key

        Returns:
            Raw document if found, None otherwise
        """
        return await db[collection].find_one({"_id": key})


    async def create(
        self, db: AsyncIOMotorDatabase, collection: str, key: str, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Insert the singleton document, keeping the existing one if another
        request inserted it first.

        Args:
            db: MongoDB database instance
            collection: Collection name
            key: Fixed document key
            data: Document body without key and timestamps

        Returns:
            The stored document
        """
        now = datetime.now(timezone.utc)
        document = {**data, "_id": key, "createdAt": now, "updatedAt": now}

        try:
            await db[collection].insert_one(document)
        except DuplicateKeyError:
            logger.info(f"Document '{key}' in '{collection}' already created, reusing it")

        return await self.get(db, collection, key)


    async def save(
        self, db: AsyncIOMotorDatabase, collection: str, key: str, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Overwrite the singleton document's fields, creating it if missing.

        Args:
            db: MongoDB database instance
            collection: Collection name
            key: Fixed document key
            data: Document body without key and timestamps

        Returns:
            The stored document
        """
        now = datetime.now(timezone.utc)
        await db[collection].update_one(
            {"_id": key},
            {"$set": {**data, "updatedAt": now}, "$setOnInsert": {"createdAt": now}},
            upsert=True,
        )
        return await self.get(db, collection, key)


content_crud = ContentCRUD()
