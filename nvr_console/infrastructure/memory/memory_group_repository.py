# Standard library imports
from copy import deepcopy
from typing import Dict, List

# Local application imports
from ...domain.repositories.group_repository import GroupRepository
from ...domain.models.group import Group


class MemoryGroupRepository(GroupRepository):
    """In-memory implementation of GroupRepository"""
    
    def __init__(self) -> None:
        self._groups: Dict[str, Group] = {}
    
    async def find_all(self) -> List[Group]:
        return [deepcopy(self._groups[name]) for name in sorted(self._groups)]
    
    async def add_if_absent(self, group: Group) -> bool:
        if group.name in self._groups:
            return False
        self._groups[group.name] = deepcopy(group)
        return True
    
    async def delete(self, name: str) -> bool:
        return self._groups.pop(name, None) is not None
