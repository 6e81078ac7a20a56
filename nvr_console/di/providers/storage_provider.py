from typing import TYPE_CHECKING
from ...domain.repositories.storage_config_repository import StorageConfigRepository
from ...application.use_cases.storage import (
    ActivateStorageConfigUseCase,
    CreateStorageConfigUseCase,
    DeleteStorageConfigUseCase,
    GetStorageConfigUseCase,
    ListStorageConfigsUseCase,
    TestStorageConnectionUseCase,
    UpdateStorageConfigUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class StorageProvider:
    """Storage config use case provider"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register storage config use cases.
        All of them except the connection test share the storage config repository.
        """
        for use_case_class in (
            ListStorageConfigsUseCase,
            GetStorageConfigUseCase,
            CreateStorageConfigUseCase,
            UpdateStorageConfigUseCase,
            DeleteStorageConfigUseCase,
            ActivateStorageConfigUseCase,
        ):
            container.register_factory(
                use_case_class,
                lambda cls=use_case_class: cls(
                    storage_config_repository=container.get(StorageConfigRepository)
                ),
            )
        
        container.register_singleton(TestStorageConnectionUseCase, TestStorageConnectionUseCase())
