# Standard library imports
import logging
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.group_repository import GroupRepository
from ...domain.models.group import Group
from ...domain.constants import GroupFields
from ...domain.exceptions import UnavailableError
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_group_collection

logger = logging.getLogger(__name__)


class MongoGroupRepository(GroupRepository):
    """MongoDB implementation of GroupRepository"""
    
    def __init__(self, group_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.group_collection = group_collection if group_collection is not None else get_group_collection()
    
    async def find_all(self) -> List[Group]:
        try:
            cursor = self.group_collection.find({}).sort(GroupFields.NAME, ASCENDING)
            return [self._document_to_group(document) async for document in cursor]
        except PyMongoError as e:
            logger.error(f"Error listing groups: {e}", exc_info=True)
            raise UnavailableError(f"Error listing groups: {str(e)}", cause=e)
    
    async def add_if_absent(self, group: Group) -> bool:
        """
        Insert the group unless its name is taken
        
        Uses an upsert with $setOnInsert so an existing group's document is
        never modified. The unique index on name settles concurrent inserts.
        
        Returns:
            True if a new group was inserted
        """
        try:
            result = await self.group_collection.update_one(
                {GroupFields.NAME: group.name},
                {"$setOnInsert": self._group_to_dict(group)},
                upsert=True,
            )
        except DuplicateKeyError:
            return False
        except PyMongoError as e:
            logger.error(f"Error creating group {group.name}: {e}", exc_info=True)
            raise UnavailableError(f"Error creating group: {str(e)}", cause=e)
        return result.upserted_id is not None
    
    async def delete(self, name: str) -> bool:
        try:
            result = await self.group_collection.delete_one({GroupFields.NAME: name})
        except PyMongoError as e:
            logger.error(f"Error deleting group {name}: {e}", exc_info=True)
            raise UnavailableError(f"Error deleting group: {str(e)}", cause=e)
        return result.deleted_count > 0
    
    def _document_to_group(self, document: Dict[str, Any]) -> Group:
        return Group(
            name=document.get(GroupFields.NAME, ""),
            created_at=ensure_utc(document.get(GroupFields.CREATED_AT)),
        )
    
    def _group_to_dict(self, group: Group) -> Dict[str, Any]:
        return {
            GroupFields.NAME: group.name,
            GroupFields.CREATED_AT: group.created_at,
        }
