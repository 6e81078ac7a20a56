# Local application imports
from ....domain.repositories.storage_config_repository import StorageConfigRepository
from ....domain.exceptions import NotFoundError
from ...dto.storage_dto import StorageConfigResponse


class GetStorageConfigUseCase:
    """Use case for getting a storage config by ID"""
    
    def __init__(self, storage_config_repository: StorageConfigRepository) -> None:
        self.storage_config_repository = storage_config_repository
    
    async def execute(self, config_id: str) -> StorageConfigResponse:
        config = await self.storage_config_repository.find_by_id(config_id)
        if config is None:
            raise NotFoundError("Config not found")
        return StorageConfigResponse.from_storage_config(config)
