from .mongo_connection import (
    get_database,
    get_camera_collection,
    get_group_collection,
    get_storage_config_collection,
    ensure_indexes,
    close_database,
)
from .mongo_camera_repository import MongoCameraRepository
from .mongo_group_repository import MongoGroupRepository
from .mongo_storage_config_repository import MongoStorageConfigRepository

__all__ = [
    "get_database",
    "get_camera_collection",
    "get_group_collection",
    "get_storage_config_collection",
    "ensure_indexes",
    "close_database",
    "MongoCameraRepository",
    "MongoGroupRepository",
    "MongoStorageConfigRepository",
]
