from abc import ABC, abstractmethod
from typing import List
from ..models.group import Group


class GroupRepository(ABC):
    """Repository interface - defines contract for camera group data access"""
    
    @abstractmethod
    async def find_all(self) -> List[Group]:
        """List all groups ordered by name"""
        pass
    
    @abstractmethod
    async def add_if_absent(self, group: Group) -> bool:
        """Insert group unless one with the same name exists; returns True if inserted"""
        pass
    
    @abstractmethod
    async def delete(self, name: str) -> bool:
        """Delete group by name; returns False if it did not exist"""
        pass
