from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.camera import Camera


class CameraRepository(ABC):
    """Repository interface - defines contract for camera data access"""
    
    @abstractmethod
    async def find_all(self) -> List[Camera]:
        """List all cameras, most recently added first"""
        pass
    
    @abstractmethod
    async def find_by_id(self, camera_id: str) -> Optional[Camera]:
        """Find camera by ID"""
        pass
    
    @abstractmethod
    async def save(self, camera: Camera) -> Camera:
        """Save camera (create or update)"""
        pass
    
    @abstractmethod
    async def delete(self, camera_id: str) -> bool:
        """Delete camera; returns False if no camera had this ID"""
        pass
    
    @abstractmethod
    async def clear_group(self, group_name: str) -> int:
        """Set group to None on every camera in the group; returns the number changed"""
        pass
