# Standard library imports
import logging

# Local application imports
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.repositories.group_repository import GroupRepository
from ....domain.constants import GroupFields
from ....domain.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


class DeleteGroupUseCase:
    """Use case for deleting a group without deleting its cameras"""
    
    def __init__(
        self,
        camera_repository: CameraRepository,
        group_repository: GroupRepository,
    ) -> None:
        self.camera_repository = camera_repository
        self.group_repository = group_repository
    
    async def execute(self, name: str) -> None:
        """
        Delete a group
        
        Member cameras are kept with their group cleared. Deleting a name that
        does not exist succeeds without changes.
        
        Raises:
            InvalidInputError: If the name is empty
        """
        if not name or not name.strip():
            raise InvalidInputError(
                "Group name is required",
                fields={GroupFields.NAME: "Group name is required"},
            )
        
        name = name.strip()
        cleared = await self.camera_repository.clear_group(name)
        deleted = await self.group_repository.delete(name)
        
        if deleted:
            logger.info(f"Deleted group '{name}' ({cleared} cameras ungrouped)")
        else:
            logger.warning(f"Group '{name}' did not exist ({cleared} cameras ungrouped)")
