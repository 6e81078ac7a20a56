from typing import TYPE_CHECKING
from ...domain.repositories.camera_repository import CameraRepository
from ...domain.repositories.storage_config_repository import StorageConfigRepository
from ...application.services.recording_schedule import RecordingSchedule
from ...application.use_cases.recording.list_recordings import ListRecordingsUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RecordingProvider:
    """Recording provider - registers the shared schedule and the recording use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        # One schedule per process so camera updates and recording reads share it
        if not container.has(RecordingSchedule):
            container.register_singleton(RecordingSchedule, RecordingSchedule())
        
        container.register_factory(
            ListRecordingsUseCase,
            lambda: ListRecordingsUseCase(
                camera_repository=container.get(CameraRepository),
                storage_config_repository=container.get(StorageConfigRepository),
                recording_schedule=container.get(RecordingSchedule),
            )
        )
