# Standard library imports
import logging

# Local application imports
from ....domain.repositories.group_repository import GroupRepository
from ....domain.models.group import Group
from ....utils.datetime_utils import utc_now
from ...dto.group_dto import GroupCreateRequest, GroupResponse

logger = logging.getLogger(__name__)


class CreateGroupUseCase:
    """Use case for creating a camera group"""
    
    def __init__(self, group_repository: GroupRepository) -> None:
        self.group_repository = group_repository
    
    async def execute(self, request: GroupCreateRequest) -> GroupResponse:
        """
        Create a group; creating a name that already exists is a no-op
        
        Raises:
            InvalidInputError: If the name is missing
        """
        group = Group(name=(request.name or "").strip(), created_at=utc_now())
        
        created = await self.group_repository.add_if_absent(group)
        if created:
            logger.info(f"Created group '{group.name}'")
        else:
            logger.info(f"Group '{group.name}' already exists; nothing to create")
        
        return GroupResponse(name=group.name)
