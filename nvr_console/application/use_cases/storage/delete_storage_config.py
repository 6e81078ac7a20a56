# Standard library imports
import logging

# Local application imports
from ....domain.repositories.storage_config_repository import StorageConfigRepository
from ....domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class DeleteStorageConfigUseCase:
    """Use case for deleting a storage config"""
    
    def __init__(self, storage_config_repository: StorageConfigRepository) -> None:
        self.storage_config_repository = storage_config_repository
    
    async def execute(self, config_id: str) -> None:
        deleted = await self.storage_config_repository.delete(config_id)
        if not deleted:
            raise NotFoundError("Config not found")
        logger.info(f"Deleted storage config {config_id}")
