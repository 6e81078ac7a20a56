from .list_storage_configs import ListStorageConfigsUseCase
from .get_storage_config import GetStorageConfigUseCase
from .create_storage_config import CreateStorageConfigUseCase
from .update_storage_config import UpdateStorageConfigUseCase
from .delete_storage_config import DeleteStorageConfigUseCase
from .activate_storage_config import ActivateStorageConfigUseCase
from .test_storage_connection import TestStorageConnectionUseCase

__all__ = [
    "ListStorageConfigsUseCase",
    "GetStorageConfigUseCase",
    "CreateStorageConfigUseCase",
    "UpdateStorageConfigUseCase",
    "DeleteStorageConfigUseCase",
    "ActivateStorageConfigUseCase",
    "TestStorageConnectionUseCase",
]
