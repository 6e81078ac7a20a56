# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, status

# Local application imports
from ...application.dto.camera_dto import CameraCreateRequest, CameraUpdateRequest, CameraResponse
from ...application.dto.common_dto import SuccessResponse
from ...application.use_cases.camera.create_camera import CreateCameraUseCase
from ...application.use_cases.camera.list_cameras import ListCamerasUseCase
from ...application.use_cases.camera.get_camera import GetCameraUseCase
from ...application.use_cases.camera.update_camera import UpdateCameraUseCase
from ...application.use_cases.camera.delete_camera import DeleteCameraUseCase
from ...di.container import get_container


router = APIRouter(tags=["cameras"])


@router.get("", response_model=List[CameraResponse])
async def list_cameras() -> List[CameraResponse]:
    """
    List all cameras, most recently added first
    
    Returns:
        List of CameraResponse objects
    """
    container = get_container()
    list_cameras_use_case = container.get(ListCamerasUseCase)
    
    return await list_cameras_use_case.execute()


@router.post("", response_model=CameraResponse, status_code=status.HTTP_201_CREATED)
async def create_camera(request: CameraCreateRequest) -> CameraResponse:
    """
    Register a new camera
    
    Args:
        request: Camera creation request
        
    Returns:
        CameraResponse with created camera information
    """
    container = get_container()
    create_camera_use_case = container.get(CreateCameraUseCase)
    
    return await create_camera_use_case.execute(request=request)


@router.get("/{camera_id}", response_model=CameraResponse)
async def get_camera(camera_id: str) -> CameraResponse:
    """
    Get a camera by ID
    
    Args:
        camera_id: ID of the camera
        
    Returns:
        CameraResponse with camera information
    """
    container = get_container()
    get_camera_use_case = container.get(GetCameraUseCase)
    
    return await get_camera_use_case.execute(camera_id=camera_id)


@router.put("/{camera_id}", response_model=CameraResponse)
async def update_camera(camera_id: str, request: CameraUpdateRequest) -> CameraResponse:
    """
    Update the fields present in the request body; others are left unchanged
    
    Args:
        camera_id: ID of the camera
        request: Partial camera update
        
    Returns:
        CameraResponse with the updated camera
    """
    container = get_container()
    update_camera_use_case = container.get(UpdateCameraUseCase)
    
    return await update_camera_use_case.execute(
        camera_id=camera_id,
        changes=request.to_changes(),
    )


@router.delete("/{camera_id}", response_model=SuccessResponse)
async def delete_camera(camera_id: str) -> SuccessResponse:
    """
    Delete a camera and its recording segments
    
    Args:
        camera_id: ID of the camera
    """
    container = get_container()
    delete_camera_use_case = container.get(DeleteCameraUseCase)
    
    await delete_camera_use_case.execute(camera_id=camera_id)
    return SuccessResponse()
