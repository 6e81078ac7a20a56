"""Constants for domain model field names"""

from .camera_fields import CameraFields
from .group_fields import GroupFields
from .storage_fields import StorageConfigFields

__all__ = [
    "CameraFields",
    "GroupFields",
    "StorageConfigFields",
]
