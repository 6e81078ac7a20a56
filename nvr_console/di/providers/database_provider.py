from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_camera_collection,
    get_group_collection,
    get_storage_config_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the database and its collections as singletons.
        The motor client connects lazily, so nothing is contacted here.
        """
        container.register_singleton("database", get_database())
        container.register_singleton("camera_collection", get_camera_collection())
        container.register_singleton("group_collection", get_group_collection())
        container.register_singleton("storage_config_collection", get_storage_config_collection())
