from .camera import Camera, CameraChanges, CameraStatus, RecordingPolicy
from .group import Group
from .partial import UNCHANGED, SetTo, Unchanged
from .recording_segment import RecordingSegment
from .storage_config import StorageConfig, StorageConfigChanges, StorageType

__all__ = [
    "Camera",
    "CameraChanges",
    "CameraStatus",
    "RecordingPolicy",
    "Group",
    "UNCHANGED",
    "SetTo",
    "Unchanged",
    "RecordingSegment",
    "StorageConfig",
    "StorageConfigChanges",
    "StorageType",
]
