# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import UserFields, ProductFields

logger = logging.getLogger(__name__)


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)
    
    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database
    
    if _mongo_database is not None:
        return _mongo_database
    
    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=10000,
        tz_aware=True,
    )
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB
    
    Returns:
        MongoDB collection for users
    """
    return get_database()["users"]


def get_product_collection() -> AsyncIOMotorCollection:
    """
    Get products collection from MongoDB
    
    Returns:
        MongoDB collection for products
    """
    return get_database()["products"]


async def ensure_indexes() -> None:
    """
    Create the indexes the application relies on.
    
    The unique index on users.email is what makes duplicate registrations
    fail at the store level.
    """
    await get_user_collection().create_index(
        [(UserFields.EMAIL, ASCENDING)], unique=True, name=UserFields.EMAIL_INDEX
    )
    products = get_product_collection()
    await products.create_index([(ProductFields.CREATED_AT, DESCENDING)], name="created_at_desc")
    await products.create_index(
        [(ProductFields.OWNER_ID, ASCENDING), (ProductFields.CREATED_AT, DESCENDING)],
        name="owner_created_at",
    )
    logger.info("MongoDB indexes ensured")


async def ping_database() -> bool:
    """Return True if the MongoDB server answers a ping"""
    try:
        await get_database().command("ping")
        return True
    except Exception as e:
        logger.warning(f"MongoDB ping failed: {e}")
        return False


def close_database() -> None:
    """Close the shared client (call on application shutdown)"""
    global _mongo_client, _mongo_database
    
    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("Closed MongoDB client")
    _mongo_client = None
    _mongo_database = None
