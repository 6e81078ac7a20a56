from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from ...domain.models.recording_segment import RecordingSegment


class RecordingResponse(BaseModel):
    """DTO for one recording segment"""
    id: str
    camera_id: str
    timestamp: datetime
    duration: int  # seconds
    file_path: Optional[str] = None
    storage_backend: Optional[str] = None

    @classmethod
    def from_segment(cls, segment: RecordingSegment) -> "RecordingResponse":
        return cls(
            id=segment.id,
            camera_id=segment.camera_id,
            timestamp=segment.start,
            duration=segment.duration_seconds,
            file_path=segment.storage_location,
            storage_backend=segment.storage_backend,
        )
