# Standard library imports
import logging
from typing import List

# Local application imports
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.repositories.storage_config_repository import StorageConfigRepository
from ....domain.exceptions import NotFoundError
from ...dto.recording_dto import RecordingResponse
from ...services.recording_schedule import RecordingSchedule

logger = logging.getLogger(__name__)


class ListRecordingsUseCase:
    """Use case for listing a camera's recording segments"""
    
    def __init__(
        self,
        camera_repository: CameraRepository,
        storage_config_repository: StorageConfigRepository,
        recording_schedule: RecordingSchedule,
    ) -> None:
        self.camera_repository = camera_repository
        self.storage_config_repository = storage_config_repository
        self.recording_schedule = recording_schedule
    
    async def execute(self, camera_id: str) -> List[RecordingResponse]:
        """
        List a camera's segments, newest first
        
        The first read materializes the schedule. Offline cameras that have
        no materialized schedule report no segments.
        
        Args:
            camera_id: ID of the camera
            
        Returns:
            List of RecordingResponse objects
            
        Raises:
            NotFoundError: If camera not found
        """
        camera = await self.camera_repository.find_by_id(camera_id)
        if camera is None:
            raise NotFoundError("Camera not found")
        
        segments = self.recording_schedule.current(camera)
        if segments is None:
            if not camera.is_online:
                logger.info(f"Camera {camera_id} is offline; no segments generated")
                return []
            active = await self.storage_config_repository.find_active()
            segments = self.recording_schedule.materialize(camera, active.name if active else None)
        
        return [RecordingResponse.from_segment(segment) for segment in reversed(segments)]
