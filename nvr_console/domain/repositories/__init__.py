from .camera_repository import CameraRepository
from .group_repository import GroupRepository
from .storage_config_repository import StorageConfigRepository

__all__ = ["CameraRepository", "GroupRepository", "StorageConfigRepository"]
