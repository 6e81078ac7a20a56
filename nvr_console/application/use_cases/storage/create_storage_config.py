# Standard library imports
import logging
import secrets

# Local application imports
from ....domain.repositories.storage_config_repository import StorageConfigRepository
from ....domain.models.storage_config import StorageConfig
from ....domain.constants.defaults import DEFAULT_STORAGE_ACTIVE
from ....utils.datetime_utils import utc_now
from ...dto.storage_dto import StorageConfigCreateRequest, StorageConfigResponse

logger = logging.getLogger(__name__)


class CreateStorageConfigUseCase:
    """Use case for creating a storage backend configuration"""
    
    def __init__(self, storage_config_repository: StorageConfigRepository) -> None:
        self.storage_config_repository = storage_config_repository
    
    def _generate_config_id(self) -> str:
        """Unique storage config ID in format STO-XXXXXXXXXXXX"""
        return f"STO-{secrets.token_hex(6).upper()}"
    
    async def execute(self, request: StorageConfigCreateRequest) -> StorageConfigResponse:
        """
        Create a storage config
        
        If is_active is set, every other config is deactivated first. The
        two writes are not atomic.
        
        Raises:
            InvalidInputError: If type or name is missing or type is unknown
        """
        now = utc_now()
        is_active = request.is_active if request.is_active is not None else DEFAULT_STORAGE_ACTIVE
        new_config = StorageConfig(
            id=self._generate_config_id(),
            type=request.type,
            name=(request.name or "").strip(),
            config=request.config or {},
            active=is_active,
            created_at=now,
            updated_at=now,
        )
        
        if new_config.active:
            deactivated = await self.storage_config_repository.deactivate_all()
            logger.info(f"Deactivated {deactivated} storage configs before creating active config")
        
        saved_config = await self.storage_config_repository.save(new_config)
        logger.info(
            f"Created {saved_config.type.value} storage config {saved_config.id} "
            f"({saved_config.name}, active={saved_config.active})"
        )
        return StorageConfigResponse.from_storage_config(saved_config)
