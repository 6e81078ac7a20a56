from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.storage_config import StorageConfig


class StorageConfigRepository(ABC):
    """
    Repository interface - defines contract for storage config data access.

    deactivate_all() and set_active() are separate writes; callers that
    switch the active backend issue them in sequence.
    """
    
    @abstractmethod
    async def find_all(self) -> List[StorageConfig]:
        """List all configs, oldest first"""
        pass
    
    @abstractmethod
    async def find_by_id(self, config_id: str) -> Optional[StorageConfig]:
        """Find config by ID"""
        pass
    
    @abstractmethod
    async def find_active(self) -> Optional[StorageConfig]:
        """Return the active config, if any"""
        pass
    
    @abstractmethod
    async def save(self, storage_config: StorageConfig) -> StorageConfig:
        """Save config (create or update)"""
        pass
    
    @abstractmethod
    async def delete(self, config_id: str) -> bool:
        """Delete config; returns False if no config had this ID"""
        pass
    
    @abstractmethod
    async def deactivate_all(self) -> int:
        """Set is_active=False on every config; returns the number changed"""
        pass
    
    @abstractmethod
    async def set_active(self, config_id: str) -> bool:
        """Set is_active=True on one config; returns False if it does not exist"""
        pass
