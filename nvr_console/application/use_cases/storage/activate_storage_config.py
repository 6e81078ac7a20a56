# Standard library imports
import logging

# Local application imports
from ....domain.repositories.storage_config_repository import StorageConfigRepository
from ....domain.exceptions import NotFoundError
from ...dto.storage_dto import StorageConfigResponse

logger = logging.getLogger(__name__)


class ActivateStorageConfigUseCase:
    """Use case for making one storage config the active backend"""
    
    def __init__(self, storage_config_repository: StorageConfigRepository) -> None:
        self.storage_config_repository = storage_config_repository
    
    async def execute(self, config_id: str) -> StorageConfigResponse:
        """
        Deactivate every config, then activate the target
        
        The two writes are sequential, not atomic: a failure between them
        leaves no active config, and concurrent activations resolve to
        whichever set_active lands last. Readers re-resolve from the list.
        
        Raises:
            NotFoundError: If config not found
        """
        config = await self.storage_config_repository.find_by_id(config_id)
        if config is None:
            raise NotFoundError("Config not found")
        
        deactivated = await self.storage_config_repository.deactivate_all()
        activated = await self.storage_config_repository.set_active(config_id)
        if not activated:
            # Deleted between the lookup and the write
            raise NotFoundError("Config not found")
        
        logger.info(f"Activated storage config {config_id} (deactivated {deactivated})")
        
        active_config = await self.storage_config_repository.find_by_id(config_id)
        if active_config is None:
            raise NotFoundError("Config not found")
        return StorageConfigResponse.from_storage_config(active_config)
