# Standard library imports
import logging

# Local application imports
from ....domain.repositories.storage_config_repository import StorageConfigRepository
from ....domain.models.storage_config import StorageConfigChanges
from ....domain.exceptions import NotFoundError
from ....utils.datetime_utils import utc_now
from ...dto.storage_dto import StorageConfigResponse

logger = logging.getLogger(__name__)


class UpdateStorageConfigUseCase:
    """Use case for partially updating a storage config"""
    
    def __init__(self, storage_config_repository: StorageConfigRepository) -> None:
        self.storage_config_repository = storage_config_repository
    
    async def execute(self, config_id: str, changes: StorageConfigChanges) -> StorageConfigResponse:
        """
        Apply the supplied changes and bump updated_at
        
        Setting active=True deactivates every config first (two separate
        writes). An empty change set only refreshes updated_at.
        
        Raises:
            NotFoundError: If config not found
            InvalidInputError: If a new value is invalid
        """
        config = await self.storage_config_repository.find_by_id(config_id)
        if config is None:
            raise NotFoundError("Config not found")
        
        updated_config = changes.apply(config, updated_at=utc_now())
        
        if changes.activates():
            await self.storage_config_repository.deactivate_all()
        
        saved_config = await self.storage_config_repository.save(updated_config)
        logger.info(f"Updated storage config {config_id}: {sorted(changes.supplied())}")
        return StorageConfigResponse.from_storage_config(saved_config)
