# Standard library imports
import logging

# Local application imports
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.repositories.group_repository import GroupRepository
from ....domain.repositories.storage_config_repository import StorageConfigRepository
from ....domain.models.camera import CameraChanges
from ....domain.models.group import Group
from ....domain.exceptions import InvalidInputError, NotFoundError
from ....utils.datetime_utils import utc_now
from ...dto.camera_dto import CameraResponse
from ...services.recording_schedule import RecordingSchedule

logger = logging.getLogger(__name__)


class UpdateCameraUseCase:
    """Use case for partially updating a camera"""
    
    def __init__(
        self,
        camera_repository: CameraRepository,
        group_repository: GroupRepository,
        storage_config_repository: StorageConfigRepository,
        recording_schedule: RecordingSchedule,
    ) -> None:
        self.camera_repository = camera_repository
        self.group_repository = group_repository
        self.storage_config_repository = storage_config_repository
        self.recording_schedule = recording_schedule
    
    async def execute(self, camera_id: str, changes: CameraChanges) -> CameraResponse:
        """
        Apply the supplied changes to a camera
        
        A new group name is created if absent. When the interval or retention
        changes, the camera's materialized segments are thrown away and, for an
        online camera, regenerated straight away under the new policy.
        
        Args:
            camera_id: ID of the camera
            changes: Attributes to change; UNCHANGED attributes are kept
            
        Returns:
            CameraResponse with the updated camera
            
        Raises:
            InvalidInputError: If no attribute is supplied or a new value is invalid
            InvalidPolicyError: If the new interval or retention is not positive or out of range
            NotFoundError: If camera not found
        """
        if changes.is_empty():
            raise InvalidInputError("No fields to update")
        
        camera = await self.camera_repository.find_by_id(camera_id)
        if camera is None:
            raise NotFoundError("Camera not found")
        
        updated_camera = changes.apply(camera)
        
        if updated_camera.group and updated_camera.group != camera.group:
            created = await self.group_repository.add_if_absent(
                Group(name=updated_camera.group, created_at=utc_now())
            )
            if created:
                logger.info(f"Created group '{updated_camera.group}' for camera {camera_id}")
        
        saved_camera = await self.camera_repository.save(updated_camera)
        logger.info(f"Updated camera {camera_id}: {sorted(changes.supplied())}")
        
        if saved_camera.policy != camera.policy:
            self.recording_schedule.discard(camera_id)
            if saved_camera.is_online:
                active = await self.storage_config_repository.find_active()
                self.recording_schedule.materialize(saved_camera, active.name if active else None)
        
        return CameraResponse.from_camera(saved_camera)
