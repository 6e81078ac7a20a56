from .list_recordings import ListRecordingsUseCase

__all__ = ["ListRecordingsUseCase"]
