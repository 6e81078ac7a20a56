# Standard library imports
import logging
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.camera_repository import CameraRepository
from ...domain.models.camera import Camera
from ...domain.constants import CameraFields
from ...domain.exceptions import UnavailableError
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_camera_collection

logger = logging.getLogger(__name__)


class MongoCameraRepository(CameraRepository):
    """MongoDB implementation of CameraRepository"""
    
    def __init__(self, camera_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.camera_collection = camera_collection if camera_collection is not None else get_camera_collection()
    
    async def find_all(self) -> List[Camera]:
        """
        List all cameras, most recently added first
        
        Returns:
            List of Camera domain models
        """
        try:
            cursor = self.camera_collection.find({}).sort(CameraFields.ADDED_AT, DESCENDING)
            cameras = []
            async for document in cursor:
                cameras.append(self._document_to_camera(document))
            return cameras
        except PyMongoError as e:
            logger.error(f"Error listing cameras: {e}", exc_info=True)
            raise UnavailableError(f"Error listing cameras: {str(e)}", cause=e)
    
    async def find_by_id(self, camera_id: str) -> Optional[Camera]:
        """
        Find camera by ID
        
        Args:
            camera_id: The camera ID to find
            
        Returns:
            Camera domain model if found, None otherwise
        """
        if not camera_id:
            return None
        
        try:
            document = await self.camera_collection.find_one({CameraFields.ID: camera_id})
        except PyMongoError as e:
            logger.error(f"Error finding camera {camera_id}: {e}", exc_info=True)
            raise UnavailableError(f"Error finding camera by ID: {str(e)}", cause=e)
        
        if document is None:
            return None
        return self._document_to_camera(document)
    
    async def save(self, camera: Camera) -> Camera:
        """
        Save camera (create new or replace existing)
        
        Concurrent saves of the same camera are last-write-wins.
        
        Args:
            camera: Camera domain model to save
            
        Returns:
            Saved Camera domain model
        """
        if not camera or not camera.id:
            raise ValueError("Camera with an ID is required")
        
        camera_dict = self._camera_to_dict(camera)
        try:
            await self.camera_collection.replace_one(
                {CameraFields.ID: camera.id},
                camera_dict,
                upsert=True,
            )
        except PyMongoError as e:
            logger.error(f"Error saving camera {camera.id}: {e}", exc_info=True)
            raise UnavailableError(f"Error saving camera: {str(e)}", cause=e)
        return camera
    
    async def delete(self, camera_id: str) -> bool:
        """
        Delete camera by ID
        
        Returns:
            True if a camera was deleted
        """
        try:
            result = await self.camera_collection.delete_one({CameraFields.ID: camera_id})
        except PyMongoError as e:
            logger.error(f"Error deleting camera {camera_id}: {e}", exc_info=True)
            raise UnavailableError(f"Error deleting camera: {str(e)}", cause=e)
        return result.deleted_count > 0
    
    async def clear_group(self, group_name: str) -> int:
        """
        Remove every camera from a group
        
        Returns:
            Number of cameras changed
        """
        try:
            result = await self.camera_collection.update_many(
                {CameraFields.GROUP_NAME: group_name},
                {"$set": {CameraFields.GROUP_NAME: None}},
            )
        except PyMongoError as e:
            logger.error(f"Error clearing group {group_name}: {e}", exc_info=True)
            raise UnavailableError(f"Error clearing camera group: {str(e)}", cause=e)
        return result.modified_count
    
    def _document_to_camera(self, document: Dict[str, Any]) -> Camera:
        """
        Convert MongoDB document to Camera domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            Camera domain model
        """
        if not document:
            raise ValueError("Invalid document: document is None or empty")
        
        return Camera(
            id=document.get(CameraFields.ID),
            name=document.get(CameraFields.NAME, ""),
            address=document.get(CameraFields.IP_ADDRESS, ""),
            port=document.get(CameraFields.PORT),
            stream_uri=document.get(CameraFields.STREAM_URL, ""),
            status=document.get(CameraFields.STATUS, "online"),
            group=document.get(CameraFields.GROUP_NAME),
            interval_min=document.get(CameraFields.RECORDING_INTERVAL_MIN),
            retention_days=document.get(CameraFields.RETENTION_DAYS),
            created_at=ensure_utc(document.get(CameraFields.ADDED_AT)),
        )
    
    def _camera_to_dict(self, camera: Camera) -> Dict[str, Any]:
        """
        Convert Camera domain model to MongoDB document
        
        Args:
            camera: Camera domain model
            
        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            CameraFields.ID: camera.id,
            CameraFields.NAME: camera.name,
            CameraFields.IP_ADDRESS: camera.address,
            CameraFields.PORT: camera.port,
            CameraFields.STREAM_URL: camera.stream_uri,
            CameraFields.STATUS: camera.status.value,
            CameraFields.GROUP_NAME: camera.group,
            CameraFields.RECORDING_INTERVAL_MIN: camera.interval_min,
            CameraFields.RETENTION_DAYS: camera.retention_days,
            CameraFields.ADDED_AT: camera.created_at,
        }
