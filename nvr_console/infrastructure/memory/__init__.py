"""
Process-local repositories.

Used when PERSISTENCE_BACKEND=memory (demos, tests). State lives for the
lifetime of the process and every read returns a copy.
"""
from .memory_camera_repository import MemoryCameraRepository
from .memory_group_repository import MemoryGroupRepository
from .memory_storage_config_repository import MemoryStorageConfigRepository

__all__ = [
    "MemoryCameraRepository",
    "MemoryGroupRepository",
    "MemoryStorageConfigRepository",
]
