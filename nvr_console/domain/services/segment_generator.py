"""
Recording segment generator.

Maps a camera's recording policy and a supplied "now" to the ordered set of
segments the camera is presumed to have produced: one clip per interval
boundary inside the retention window [now - retention, now).

Alignment follows the minute-of-hour rule: the window start has its minute
rounded up to a multiple of the interval and its seconds dropped. Intervals
that do not divide 60 keep stepping from that start, so later hours are not
re-aligned.
"""
# Standard library imports
from datetime import datetime, timedelta, timezone
from typing import Iterator, List, Optional

# Local application imports
from ..constants import CameraFields
from ..exceptions import InvalidPolicyError
from ..models.camera import Camera, RecordingPolicy
from ..models.recording_segment import RecordingSegment

SECONDS_PER_MINUTE = 60


def align_to_interval(moment: datetime, interval_min: int) -> datetime:
    """
    Round moment's minute-of-hour up to the next multiple of interval_min.

    Seconds and sub-seconds are truncated, so the result can fall up to a
    minute before moment. Minutes past 59 roll into the next hour.
    """
    top_of_hour = moment.replace(minute=0, second=0, microsecond=0)
    minutes = -(-moment.minute // interval_min) * interval_min
    return top_of_hour + timedelta(minutes=minutes)


def iter_segments(
    camera: Camera,
    now: datetime,
    storage_backend: Optional[str] = None,
) -> Iterator[RecordingSegment]:
    """
    Lazily yield the camera's segments in ascending start order.

    Args:
        camera: Camera whose id and policy are read; status is ignored
        now: Current time (naive values are taken as UTC)
        storage_backend: Name of the active storage backend, copied onto every segment

    Returns:
        Iterator of RecordingSegment

    Raises:
        InvalidPolicyError: If the interval or retention is not positive, is out of
            range, or reaches back before the earliest representable time
    """
    # Re-checked here: callers may hand in a camera mutated after validation
    policy = RecordingPolicy(camera.interval_min, camera.retention_days)

    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    try:
        cutoff = now - timedelta(days=policy.retention_days)
    except OverflowError:
        raise InvalidPolicyError(
            f"Cannot generate segments for camera {camera.id}: retention window out of range",
            fields={CameraFields.RETENTION_DAYS: "reaches before the earliest representable time"},
        )

    return _walk(camera.id, now, cutoff, policy.interval_min, storage_backend)


def _walk(
    camera_id: str,
    now: datetime,
    cutoff: datetime,
    interval_min: int,
    storage_backend: Optional[str],
) -> Iterator[RecordingSegment]:
    if cutoff >= now:
        return

    step = timedelta(minutes=interval_min)
    duration_seconds = interval_min * SECONDS_PER_MINUTE
    current = align_to_interval(cutoff, interval_min)
    while current < now:
        yield RecordingSegment(
            id=RecordingSegment.make_id(camera_id, current),
            camera_id=camera_id,
            start=current,
            duration_seconds=duration_seconds,
            storage_backend=storage_backend,
        )
        current = current + step


def generate_segments(
    camera: Camera,
    now: datetime,
    storage_backend: Optional[str] = None,
) -> List[RecordingSegment]:
    """Materialize iter_segments() into a list, oldest first."""
    return list(iter_segments(camera, now, storage_backend))
