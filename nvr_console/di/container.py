# Standard library imports
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    CameraProvider,
    DatabaseProvider,
    GroupProvider,
    RecordingProvider,
    RepositoryProvider,
    StorageProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Database connections (DatabaseProvider) - skipped for the memory backend
    2. Repositories (RepositoryProvider) - depends on database
    3. Recording schedule and use cases - depend on repositories
    """
    
    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        # Step 1: Register database connections (foundation)
        if self.settings.persistence_backend == "mongo":
            DatabaseProvider.register(self)
        
        # Step 2: Register repositories (depends on database)
        RepositoryProvider.register(self, self.settings.persistence_backend)
        
        # Step 3: Register use cases (depends on repositories)
        RecordingProvider.register(self)
        CameraProvider.register(self)
        GroupProvider.register(self)
        StorageProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)
    
    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def set_container(container: Optional[DIContainer]) -> None:
    """Replace the global container (None resets it); used by tests and scripts"""
    global _container
    _container = container
