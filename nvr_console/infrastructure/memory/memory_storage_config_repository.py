# Standard library imports
from copy import deepcopy
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional

# Local application imports
from ...domain.repositories.storage_config_repository import StorageConfigRepository
from ...domain.models.storage_config import StorageConfig
from ...utils.datetime_utils import utc_now

_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


class MemoryStorageConfigRepository(StorageConfigRepository):
    """In-memory implementation of StorageConfigRepository"""
    
    def __init__(self) -> None:
        self._configs: Dict[str, StorageConfig] = {}
    
    async def find_all(self) -> List[StorageConfig]:
        configs = sorted(self._configs.values(), key=lambda config: config.created_at or _EARLIEST)
        return [deepcopy(config) for config in configs]
    
    async def find_by_id(self, config_id: str) -> Optional[StorageConfig]:
        config = self._configs.get(config_id)
        return deepcopy(config) if config is not None else None
    
    async def find_active(self) -> Optional[StorageConfig]:
        for config in self._configs.values():
            if config.active:
                return deepcopy(config)
        return None
    
    async def save(self, storage_config: StorageConfig) -> StorageConfig:
        if not storage_config or not storage_config.id:
            raise ValueError("Storage config with an ID is required")
        self._configs[storage_config.id] = deepcopy(storage_config)
        return storage_config
    
    async def delete(self, config_id: str) -> bool:
        return self._configs.pop(config_id, None) is not None
    
    async def deactivate_all(self) -> int:
        active_ids = [config_id for config_id, config in self._configs.items() if config.active]
        now = utc_now()
        for config_id in active_ids:
            self._configs[config_id] = replace(self._configs[config_id], active=False, updated_at=now)
        return len(active_ids)
    
    async def set_active(self, config_id: str) -> bool:
        config = self._configs.get(config_id)
        if config is None:
            return False
        self._configs[config_id] = replace(config, active=True, updated_at=utc_now())
        return True
