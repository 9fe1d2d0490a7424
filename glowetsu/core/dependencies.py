from motor.motor_asyncio import AsyncIOMotorDatabase


from glowetsu.database import session_mongo
from glowetsu.services.image_services import ImageService, image_service


async def get_mongo_db() -> AsyncIOMotorDatabase:
    """
    Provide the MongoDB database instance, connecting on first use.

    Args:
        None

    Returns:
        An instance of AsyncIOMotorDatabase.
    """
    if session_mongo.mongo_manager.db is None:
        await session_mongo.connect_to_mongo()
    return session_mongo.mongo_manager.db


def get_image_uploader() -> ImageService:
    """
    Provide the object storage uploader for content images.

    Args:
        None

    Returns:
        An instance of ImageService.
    """
    return image_service
