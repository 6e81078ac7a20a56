# Standard library imports
import secrets
import logging

# Local application imports
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.repositories.group_repository import GroupRepository
from ....domain.models.camera import Camera, CameraStatus
from ....domain.models.group import Group
from ....domain.constants import CameraFields
from ....domain.constants.defaults import (
    DEFAULT_CAMERA_PORT,
    DEFAULT_RECORDING_INTERVAL_MIN,
    DEFAULT_RETENTION_DAYS,
    default_stream_url,
)
from ....domain.exceptions import InvalidInputError
from ....utils.datetime_utils import utc_now
from ...dto.camera_dto import CameraCreateRequest, CameraResponse

logger = logging.getLogger(__name__)


class CreateCameraUseCase:
    """Use case for registering a new camera"""
    
    def __init__(
        self,
        camera_repository: CameraRepository,
        group_repository: GroupRepository,
    ) -> None:
        self.camera_repository = camera_repository
        self.group_repository = group_repository
    
    def _generate_camera_id(self) -> str:
        """
        Generate a unique camera ID
        
        Returns:
            Unique camera ID string in format CAM-XXXXXXXXXXXX
        """
        return f"CAM-{secrets.token_hex(6).upper()}"
    
    async def execute(self, request: CameraCreateRequest) -> CameraResponse:
        """
        Create a new camera
        
        Omitted fields get their defaults: port 554, stream URL
        rtsp://{ip_address}:{port}/stream1, a 10 minute interval and 3 days of
        retention. A group name that does not exist yet is created.
        
        Args:
            request: Camera creation request
            
        Returns:
            CameraResponse with created camera information
            
        Raises:
            InvalidInputError: If name or ip_address is missing, or a field is malformed
            InvalidPolicyError: If interval or retention is not positive or out of range
        """
        missing = {}
        if not request.name or not request.name.strip():
            missing[CameraFields.NAME] = "Camera name is required"
        if not request.ip_address or not request.ip_address.strip():
            missing[CameraFields.IP_ADDRESS] = "Camera address is required"
        if missing:
            raise InvalidInputError("Missing required camera fields", fields=missing)
        
        port = request.port if request.port is not None else DEFAULT_CAMERA_PORT
        group_name = (request.group_name or "").strip() or None
        
        # Validate the whole record before touching persistence
        new_camera = Camera(
            id=self._generate_camera_id(),
            name=request.name.strip(),
            address=request.ip_address.strip(),
            port=port,
            stream_uri=request.stream_url or default_stream_url(request.ip_address.strip(), port),
            status=CameraStatus.ONLINE,
            group=group_name,
            interval_min=(
                request.recording_interval_min
                if request.recording_interval_min is not None
                else DEFAULT_RECORDING_INTERVAL_MIN
            ),
            retention_days=(
                request.retention_days
                if request.retention_days is not None
                else DEFAULT_RETENTION_DAYS
            ),
            created_at=utc_now(),
        )
        
        if group_name:
            created = await self.group_repository.add_if_absent(Group(name=group_name, created_at=utc_now()))
            if created:
                logger.info(f"Created group '{group_name}' for new camera {new_camera.id}")
        
        saved_camera = await self.camera_repository.save(new_camera)
        logger.info(f"Created camera {saved_camera.id} ({saved_camera.name}) at {saved_camera.stream_uri}")
        
        return CameraResponse.from_camera(saved_camera)
