# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class RecordingSegment:
    """
    One presumed recorded clip of a camera.

    Segments are derived from the camera's recording policy and never stored.
    """
    id: str
    camera_id: str
    start: datetime
    duration_seconds: int
    storage_location: Optional[str] = None
    storage_backend: Optional[str] = None

    @staticmethod
    def make_id(camera_id: str, start: datetime) -> str:
        """Deterministic id: camera id plus the segment start in epoch milliseconds."""
        epoch_millis = int(round(start.timestamp() * 1000))
        return f"{camera_id}-{epoch_millis}"
