# Standard library imports
import logging

# Local application imports
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.exceptions import NotFoundError
from ...services.recording_schedule import RecordingSchedule

logger = logging.getLogger(__name__)


class DeleteCameraUseCase:
    """Use case for deleting a camera together with its recording segments"""
    
    def __init__(
        self,
        camera_repository: CameraRepository,
        recording_schedule: RecordingSchedule,
    ) -> None:
        self.camera_repository = camera_repository
        self.recording_schedule = recording_schedule
    
    async def execute(self, camera_id: str) -> None:
        """
        Delete a camera
        
        Raises:
            NotFoundError: If camera not found
        """
        deleted = await self.camera_repository.delete(camera_id)
        if not deleted:
            raise NotFoundError("Camera not found")
        
        self.recording_schedule.discard(camera_id)
        logger.info(f"Deleted camera {camera_id}")
