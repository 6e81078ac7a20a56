# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.recording_dto import RecordingResponse
from ...application.use_cases.recording.list_recordings import ListRecordingsUseCase
from ...di.container import get_container


router = APIRouter(tags=["recordings"])


@router.get("/{camera_id}", response_model=List[RecordingResponse])
async def list_recordings(camera_id: str) -> List[RecordingResponse]:
    """
    List a camera's recording segments, newest first
    
    Args:
        camera_id: ID of the camera
        
    Returns:
        List of RecordingResponse objects
    """
    container = get_container()
    list_recordings_use_case = container.get(ListRecordingsUseCase)
    
    return await list_recordings_use_case.execute(camera_id=camera_id)
