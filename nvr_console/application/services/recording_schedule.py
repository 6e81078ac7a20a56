# Standard library imports
import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional, Tuple

# Local application imports
from ...domain.models.camera import Camera, RecordingPolicy
from ...domain.models.recording_segment import RecordingSegment
from ...domain.services.segment_generator import generate_segments
from ...utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)


class RecordingSchedule:
    """
    Materialized segment sets, one per camera.

    A camera's set is generated on first read and replaced wholesale when its
    recording policy changes; nothing is merged across generations. The clock
    is injectable so tests can pin "now".
    """
    
    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock
        self._segments: Dict[str, Tuple[RecordingPolicy, List[RecordingSegment]]] = {}
    
    def current(self, camera: Camera) -> Optional[List[RecordingSegment]]:
        """
        Return the camera's materialized segments, oldest first.
        
        A set generated under a different policy is discarded and None is
        returned, as it is when nothing has been generated yet.
        """
        entry = self._segments.get(camera.id)
        if entry is None:
            return None
        policy, segments = entry
        if policy != camera.policy:
            logger.info(
                f"Recording policy of camera {camera.id} changed from {policy} to {camera.policy}; "
                f"discarding {len(segments)} stale segments"
            )
            del self._segments[camera.id]
            return None
        return segments
    
    def materialize(self, camera: Camera, storage_backend: Optional[str] = None) -> List[RecordingSegment]:
        """
        Generate the camera's segments at the current clock time and store them,
        replacing any previous set.
        
        Raises:
            InvalidPolicyError: If the camera's interval or retention is not positive
        """
        segments = generate_segments(camera, self._clock(), storage_backend)
        self._segments[camera.id] = (camera.policy, segments)
        logger.info(
            f"Materialized {len(segments)} segments for camera {camera.id} "
            f"(interval={camera.interval_min}min, retention={camera.retention_days}d)"
        )
        return segments
    
    def discard(self, camera_id: str) -> None:
        """Forget the camera's segments (policy change or deletion)"""
        if self._segments.pop(camera_id, None) is not None:
            logger.debug(f"Discarded materialized segments for camera {camera_id}")
