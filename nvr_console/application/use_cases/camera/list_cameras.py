# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.camera_repository import CameraRepository
from ...dto.camera_dto import CameraResponse


class ListCamerasUseCase:
    """Use case for listing all cameras"""
    
    def __init__(self, camera_repository: CameraRepository) -> None:
        self.camera_repository = camera_repository
    
    async def execute(self) -> List[CameraResponse]:
        """
        List all cameras, most recently added first
        
        Returns:
            List of CameraResponse objects
        """
        cameras = await self.camera_repository.find_all()
        return [CameraResponse.from_camera(camera) for camera in cameras]
