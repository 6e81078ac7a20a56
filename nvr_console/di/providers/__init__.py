from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .recording_provider import RecordingProvider
from .camera_provider import CameraProvider
from .group_provider import GroupProvider
from .storage_provider import StorageProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "RecordingProvider",
    "CameraProvider",
    "GroupProvider",
    "StorageProvider",
]
