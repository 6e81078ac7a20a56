# Standard library imports
from copy import deepcopy
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional

# Local application imports
from ...domain.repositories.camera_repository import CameraRepository
from ...domain.models.camera import Camera

_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


class MemoryCameraRepository(CameraRepository):
    """In-memory implementation of CameraRepository"""
    
    def __init__(self) -> None:
        self._cameras: Dict[str, Camera] = {}
    
    async def find_all(self) -> List[Camera]:
        # Stable sort over reversed insertion order: ties list the later insert first
        cameras = list(self._cameras.values())[::-1]
        cameras.sort(key=lambda camera: camera.created_at or _EARLIEST, reverse=True)
        return [deepcopy(camera) for camera in cameras]
    
    async def find_by_id(self, camera_id: str) -> Optional[Camera]:
        camera = self._cameras.get(camera_id)
        return deepcopy(camera) if camera is not None else None
    
    async def save(self, camera: Camera) -> Camera:
        if not camera or not camera.id:
            raise ValueError("Camera with an ID is required")
        self._cameras[camera.id] = deepcopy(camera)
        return camera
    
    async def delete(self, camera_id: str) -> bool:
        return self._cameras.pop(camera_id, None) is not None
    
    async def clear_group(self, group_name: str) -> int:
        members = [camera for camera in self._cameras.values() if camera.group == group_name]
        for camera in members:
            self._cameras[camera.id] = replace(camera, group=None)
        return len(members)
