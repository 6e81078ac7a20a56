# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.common_dto import SuccessResponse
from ...application.dto.storage_dto import (
    StorageConfigCreateRequest,
    StorageConfigUpdateRequest,
    StorageConfigResponse,
    StorageTestRequest,
    StorageTestResponse,
)
from ...application.use_cases.storage import (
    ActivateStorageConfigUseCase,
    CreateStorageConfigUseCase,
    DeleteStorageConfigUseCase,
    GetStorageConfigUseCase,
    ListStorageConfigsUseCase,
    TestStorageConnectionUseCase,
    UpdateStorageConfigUseCase,
)
from ...di.container import get_container


router = APIRouter(tags=["storage"])


@router.get("", response_model=List[StorageConfigResponse])
async def list_storage_configs() -> List[StorageConfigResponse]:
    """List storage configs, oldest first"""
    container = get_container()
    list_use_case = container.get(ListStorageConfigsUseCase)
    
    return await list_use_case.execute()


@router.post("", response_model=StorageConfigResponse, status_code=status.HTTP_201_CREATED)
async def create_storage_config(request: StorageConfigCreateRequest) -> StorageConfigResponse:
    """Create a storage config; is_active=true deactivates the others first"""
    container = get_container()
    create_use_case = container.get(CreateStorageConfigUseCase)
    
    return await create_use_case.execute(request=request)


@router.post(
    "/test",
    response_model=StorageTestResponse,
    responses={400: {"model": StorageTestResponse}},
)
async def test_storage_connection(request: StorageTestRequest) -> JSONResponse:
    """
    Check a storage configuration's required fields.
    
    No connection is attempted; a 200 only means the fields are present.
    Missing fields produce a 400 with success=false.
    """
    container = get_container()
    test_use_case = container.get(TestStorageConnectionUseCase)
    
    result = await test_use_case.execute(request=request)
    body = StorageTestResponse(success=result.ok, message=result.message)
    return JSONResponse(
        status_code=status.HTTP_200_OK if result.ok else status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(),
    )


@router.get("/{config_id}", response_model=StorageConfigResponse)
async def get_storage_config(config_id: str) -> StorageConfigResponse:
    container = get_container()
    get_use_case = container.get(GetStorageConfigUseCase)
    
    return await get_use_case.execute(config_id=config_id)


@router.put("/{config_id}", response_model=StorageConfigResponse)
async def update_storage_config(config_id: str, request: StorageConfigUpdateRequest) -> StorageConfigResponse:
    """Update the non-null fields of a storage config"""
    container = get_container()
    update_use_case = container.get(UpdateStorageConfigUseCase)
    
    return await update_use_case.execute(config_id=config_id, changes=request.to_changes())


@router.delete("/{config_id}", response_model=SuccessResponse)
async def delete_storage_config(config_id: str) -> SuccessResponse:
    container = get_container()
    delete_use_case = container.get(DeleteStorageConfigUseCase)
    
    await delete_use_case.execute(config_id=config_id)
    return SuccessResponse()


@router.post("/{config_id}/activate", response_model=StorageConfigResponse)
async def activate_storage_config(config_id: str) -> StorageConfigResponse:
    """Make this config the only active storage backend"""
    container = get_container()
    activate_use_case = container.get(ActivateStorageConfigUseCase)
    
    return await activate_use_case.execute(config_id=config_id)
