# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import CameraFields, GroupFields, StorageConfigFields

logger = logging.getLogger(__name__)

CAMERAS_COLLECTION = "cameras"
GROUPS_COLLECTION = "groups"
STORAGE_CONFIG_COLLECTION = "storage_config"


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
    # Fail fast when MongoDB is unreachable instead of hanging on every request
    _mongo_client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
        tz_aware=True,
    )
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_camera_collection() -> AsyncIOMotorCollection:
    """
    Get cameras collection from MongoDB
    
    Returns:
        MongoDB collection for cameras
    """
    return get_database()[CAMERAS_COLLECTION]


def get_group_collection() -> AsyncIOMotorCollection:
    """
    Get groups collection from MongoDB
    
    Returns:
        MongoDB collection for camera groups
    """
    return get_database()[GROUPS_COLLECTION]


def get_storage_config_collection() -> AsyncIOMotorCollection:
    """
    Get storage_config collection from MongoDB
    
    Returns:
        MongoDB collection for storage backend configurations
    """
    return get_database()[STORAGE_CONFIG_COLLECTION]


async def ensure_indexes(database: AsyncIOMotorDatabase) -> None:
    """Create the indexes the repositories rely on (idempotent)"""
    await database[GROUPS_COLLECTION].create_index([(GroupFields.NAME, ASCENDING)], unique=True)
    await database[CAMERAS_COLLECTION].create_index([(CameraFields.ID, ASCENDING)], unique=True)
    await database[CAMERAS_COLLECTION].create_index([(CameraFields.GROUP_NAME, ASCENDING)])
    await database[STORAGE_CONFIG_COLLECTION].create_index(
        [(StorageConfigFields.ID, ASCENDING)], unique=True
    )
    logger.info("MongoDB indexes ensured")


def close_database() -> None:
    """Close the MongoDB client (call on application shutdown)"""
    global _mongo_client, _mongo_database
    
    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
        _mongo_database = None
        logger.info("Closed MongoDB client")
