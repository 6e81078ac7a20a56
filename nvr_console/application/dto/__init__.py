from .common_dto import SuccessResponse
from .camera_dto import CameraCreateRequest, CameraUpdateRequest, CameraResponse
from .group_dto import GroupCreateRequest, GroupResponse
from .recording_dto import RecordingResponse
from .storage_dto import (
    StorageConfigCreateRequest,
    StorageConfigUpdateRequest,
    StorageConfigResponse,
    StorageTestRequest,
    StorageTestResponse,
)

__all__ = [
    "SuccessResponse",
    "CameraCreateRequest",
    "CameraUpdateRequest",
    "CameraResponse",
    "GroupCreateRequest",
    "GroupResponse",
    "RecordingResponse",
    "StorageConfigCreateRequest",
    "StorageConfigUpdateRequest",
    "StorageConfigResponse",
    "StorageTestRequest",
    "StorageTestResponse",
]
