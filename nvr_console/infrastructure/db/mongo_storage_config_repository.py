# Standard library imports
import logging
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.storage_config_repository import StorageConfigRepository
from ...domain.models.storage_config import StorageConfig
from ...domain.constants import StorageConfigFields
from ...domain.exceptions import UnavailableError
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_storage_config_collection

logger = logging.getLogger(__name__)


class MongoStorageConfigRepository(StorageConfigRepository):
    """MongoDB implementation of StorageConfigRepository"""
    
    def __init__(self, storage_config_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.storage_config_collection = (
            storage_config_collection
            if storage_config_collection is not None
            else get_storage_config_collection()
        )
    
    async def find_all(self) -> List[StorageConfig]:
        try:
            cursor = self.storage_config_collection.find({}).sort(StorageConfigFields.CREATED_AT, ASCENDING)
            return [self._document_to_config(document) async for document in cursor]
        except PyMongoError as e:
            logger.error(f"Error listing storage configs: {e}", exc_info=True)
            raise UnavailableError(f"Error listing storage configs: {str(e)}", cause=e)
    
    async def find_by_id(self, config_id: str) -> Optional[StorageConfig]:
        if not config_id:
            return None
        try:
            document = await self.storage_config_collection.find_one({StorageConfigFields.ID: config_id})
        except PyMongoError as e:
            logger.error(f"Error finding storage config {config_id}: {e}", exc_info=True)
            raise UnavailableError(f"Error finding storage config: {str(e)}", cause=e)
        return self._document_to_config(document) if document else None
    
    async def find_active(self) -> Optional[StorageConfig]:
        try:
            document = await self.storage_config_collection.find_one({StorageConfigFields.IS_ACTIVE: True})
        except PyMongoError as e:
            logger.error(f"Error finding active storage config: {e}", exc_info=True)
            raise UnavailableError(f"Error finding active storage config: {str(e)}", cause=e)
        return self._document_to_config(document) if document else None
    
    async def save(self, storage_config: StorageConfig) -> StorageConfig:
        if not storage_config or not storage_config.id:
            raise ValueError("Storage config with an ID is required")
        try:
            await self.storage_config_collection.replace_one(
                {StorageConfigFields.ID: storage_config.id},
                self._config_to_dict(storage_config),
                upsert=True,
            )
        except PyMongoError as e:
            logger.error(f"Error saving storage config {storage_config.id}: {e}", exc_info=True)
            raise UnavailableError(f"Error saving storage config: {str(e)}", cause=e)
        return storage_config
    
    async def delete(self, config_id: str) -> bool:
        try:
            result = await self.storage_config_collection.delete_one({StorageConfigFields.ID: config_id})
        except PyMongoError as e:
            logger.error(f"Error deleting storage config {config_id}: {e}", exc_info=True)
            raise UnavailableError(f"Error deleting storage config: {str(e)}", cause=e)
        return result.deleted_count > 0
    
    async def deactivate_all(self) -> int:
        try:
            result = await self.storage_config_collection.update_many(
                {StorageConfigFields.IS_ACTIVE: True},
                {"$set": {StorageConfigFields.IS_ACTIVE: False, StorageConfigFields.UPDATED_AT: utc_now()}},
            )
        except PyMongoError as e:
            logger.error(f"Error deactivating storage configs: {e}", exc_info=True)
            raise UnavailableError(f"Error deactivating storage configs: {str(e)}", cause=e)
        return result.modified_count
    
    async def set_active(self, config_id: str) -> bool:
        try:
            result = await self.storage_config_collection.update_one(
                {StorageConfigFields.ID: config_id},
                {"$set": {StorageConfigFields.IS_ACTIVE: True, StorageConfigFields.UPDATED_AT: utc_now()}},
            )
        except PyMongoError as e:
            logger.error(f"Error activating storage config {config_id}: {e}", exc_info=True)
            raise UnavailableError(f"Error activating storage config: {str(e)}", cause=e)
        return result.matched_count > 0
    
    def _document_to_config(self, document: Dict[str, Any]) -> StorageConfig:
        return StorageConfig(
            id=document.get(StorageConfigFields.ID),
            type=document.get(StorageConfigFields.TYPE),
            name=document.get(StorageConfigFields.NAME, ""),
            config=document.get(StorageConfigFields.CONFIG) or {},
            active=bool(document.get(StorageConfigFields.IS_ACTIVE, False)),
            created_at=ensure_utc(document.get(StorageConfigFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(StorageConfigFields.UPDATED_AT)),
        )
    
    def _config_to_dict(self, storage_config: StorageConfig) -> Dict[str, Any]:
        return {
            StorageConfigFields.ID: storage_config.id,
            StorageConfigFields.TYPE: storage_config.type.value,
            StorageConfigFields.NAME: storage_config.name,
            StorageConfigFields.CONFIG: dict(storage_config.config),
            StorageConfigFields.IS_ACTIVE: storage_config.active,
            StorageConfigFields.CREATED_AT: storage_config.created_at,
            StorageConfigFields.UPDATED_AT: storage_config.updated_at,
        }
