# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.group_repository import GroupRepository


class ListGroupsUseCase:
    """Use case for listing group names"""
    
    def __init__(self, group_repository: GroupRepository) -> None:
        self.group_repository = group_repository
    
    async def execute(self) -> List[str]:
        """
        List group names in lexicographic order
        
        Returns:
            List of group names
        """
        groups = await self.group_repository.find_all()
        return sorted(group.name for group in groups)
