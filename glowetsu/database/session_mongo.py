from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase


from glowetsu.core.config import settings
from glowetsu.utils.logger_utils import get_logger


logger = get_logger(__name__)


class MongoManager:
    """
    Manages the asynchronous MongoDB connection and database instance.
    """

    client: AsyncIOMotorClient | None = None
    db: AsyncIOMotorDatabase | None = None


mongo_manager = MongoManager()


async def connect_to_mongo():
    """
    Establishes the MongoDB client connection and set the database instance.
    Calling it again while a connection is open is a no-op.

    Args:
        None

    Returns:
        None
    """
    if mongo_manager.client is not None:
        return

    client = AsyncIOMotorClient(settings.MONGO_URI)

    try:
        await client.admin.command("ping")
    except Exception as e:
        client.close()
        raise Exception(f"Failed to connect to MongoDB: {e}")

    mongo_manager.client = client
    mongo_manager.db = client[settings.MONGO_DB]
    logger.info(f"Connected to MongoDB database '{settings.MONGO_DB}'")


async def close_mongo_connection():
    """
    Closes the MongoDB client connection.

    Args:
        None

    Returns:
        None
    """
    if mongo_manager.client:
        mongo_manager.client.close()
    mongo_manager.client = None
    mongo_manager.db = None
