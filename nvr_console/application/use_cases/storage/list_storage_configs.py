# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.storage_config_repository import StorageConfigRepository
from ...dto.storage_dto import StorageConfigResponse


class ListStorageConfigsUseCase:
    """Use case for listing storage configs"""
    
    def __init__(self, storage_config_repository: StorageConfigRepository) -> None:
        self.storage_config_repository = storage_config_repository
    
    async def execute(self) -> List[StorageConfigResponse]:
        """
        List all storage configs, oldest first
        
        Callers that need the active backend should read it from this list;
        after an interrupted activation there may be none.
        """
        configs = await self.storage_config_repository.find_all()
        return [StorageConfigResponse.from_storage_config(config) for config in configs]
