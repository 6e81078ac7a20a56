from typing import TYPE_CHECKING
from ...domain.repositories.camera_repository import CameraRepository
from ...domain.repositories.group_repository import GroupRepository
from ...domain.repositories.storage_config_repository import StorageConfigRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer", backend: str = "mongo") -> None:
        """
        Register all repository implementations for the configured backend.
        
        Raises:
            ValueError: If backend is neither "mongo" nor "memory"
        """
        if backend == "mongo":
            from ...infrastructure.db.mongo_camera_repository import MongoCameraRepository
            from ...infrastructure.db.mongo_group_repository import MongoGroupRepository
            from ...infrastructure.db.mongo_storage_config_repository import MongoStorageConfigRepository
            
            container.register_singleton(
                CameraRepository,
                MongoCameraRepository(camera_collection=container.get("camera_collection")),
            )
            container.register_singleton(
                GroupRepository,
                MongoGroupRepository(group_collection=container.get("group_collection")),
            )
            container.register_singleton(
                StorageConfigRepository,
                MongoStorageConfigRepository(
                    storage_config_collection=container.get("storage_config_collection")
                ),
            )
        elif backend == "memory":
            from ...infrastructure.memory import (
                MemoryCameraRepository,
                MemoryGroupRepository,
                MemoryStorageConfigRepository,
            )
            
            container.register_singleton(CameraRepository, MemoryCameraRepository())
            container.register_singleton(GroupRepository, MemoryGroupRepository())
            container.register_singleton(StorageConfigRepository, MemoryStorageConfigRepository())
        else:
            raise ValueError(f"Unknown persistence backend '{backend}' (expected 'mongo' or 'memory')")
