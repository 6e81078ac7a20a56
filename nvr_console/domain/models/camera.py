# Standard library imports
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Optional

# Local application imports
from ..constants import CameraFields
from ..constants.defaults import (
    DEFAULT_RECORDING_INTERVAL_MIN,
    DEFAULT_RETENTION_DAYS,
    MAX_RECORDING_INTERVAL_MIN,
    MAX_RETENTION_DAYS,
    MAX_SEGMENTS_PER_CAMERA,
)
from ..exceptions import InvalidInputError, InvalidPolicyError
from .partial import ChangeSet, Change, UNCHANGED


class CameraStatus(str, Enum):
    """Operational status of a camera. Set manually; devices are never polled."""
    ONLINE = "online"
    OFFLINE = "offline"


@dataclass(frozen=True)
class RecordingPolicy:
    """
    A camera's (interval, retention) pair governing segment generation.

    Both values are positive and bounded; the retention window may hold at
    most MAX_SEGMENTS_PER_CAMERA segments.
    """
    interval_min: int
    retention_days: int

    def __post_init__(self) -> None:
        """Business validations"""
        problems = {}
        if not _is_positive_int(self.interval_min):
            problems[CameraFields.RECORDING_INTERVAL_MIN] = "must be a positive integer"
        elif self.interval_min > MAX_RECORDING_INTERVAL_MIN:
            problems[CameraFields.RECORDING_INTERVAL_MIN] = f"must be at most {MAX_RECORDING_INTERVAL_MIN}"
        if not _is_positive_int(self.retention_days):
            problems[CameraFields.RETENTION_DAYS] = "must be a positive integer"
        elif self.retention_days > MAX_RETENTION_DAYS:
            problems[CameraFields.RETENTION_DAYS] = f"must be at most {MAX_RETENTION_DAYS}"
        if problems:
            raise InvalidPolicyError("Invalid recording policy", fields=problems)

        if self.segment_count() > MAX_SEGMENTS_PER_CAMERA:
            raise InvalidPolicyError(
                "Recording policy yields too many segments",
                fields={
                    CameraFields.RETENTION_DAYS: (
                        f"{self.retention_days} days of {self.interval_min} minute clips exceeds "
                        f"{MAX_SEGMENTS_PER_CAMERA} segments"
                    ),
                },
            )

    def segment_count(self) -> int:
        """Nominal number of segments in the retention window"""
        return self.retention_days * 24 * 60 // self.interval_min


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass
class Camera:
    """
    Pure domain model for Camera entity - no external dependencies.

    Field names are internal; the snake_case names used in storage and on
    the wire live in CameraFields and are applied by repositories and DTOs.
    """
    id: Optional[str]
    name: str
    address: str
    port: int
    stream_uri: str
    status: CameraStatus = CameraStatus.ONLINE
    group: Optional[str] = None
    interval_min: int = DEFAULT_RECORDING_INTERVAL_MIN
    retention_days: int = DEFAULT_RETENTION_DAYS
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        problems = {}
        if not self.name or len(self.name.strip()) < 1:
            problems[CameraFields.NAME] = "Camera name is required"
        if not self.address or len(self.address.strip()) < 1:
            problems[CameraFields.IP_ADDRESS] = "Camera address is required"
        if not isinstance(self.port, int) or isinstance(self.port, bool) or not 0 < self.port < 65536:
            problems[CameraFields.PORT] = "Port must be between 1 and 65535"
        if not self.stream_uri or len(self.stream_uri.strip()) < 1:
            problems[CameraFields.STREAM_URL] = "Stream URL is required"
        try:
            self.status = CameraStatus(self.status)
        except ValueError:
            problems[CameraFields.STATUS] = "Status must be 'online' or 'offline'"
        if isinstance(self.group, str):
            # Group names are stored trimmed; blank means no group
            self.group = self.group.strip() or None
        if problems:
            raise InvalidInputError("Invalid camera fields", fields=problems)
        # Raises InvalidPolicyError
        RecordingPolicy(self.interval_min, self.retention_days)

    @property
    def policy(self) -> RecordingPolicy:
        return RecordingPolicy(self.interval_min, self.retention_days)

    @property
    def is_online(self) -> bool:
        return self.status == CameraStatus.ONLINE


@dataclass
class CameraChanges(ChangeSet):
    """Partial update for a camera; attributes left UNCHANGED keep their value."""
    name: Change[str] = UNCHANGED
    address: Change[str] = UNCHANGED
    port: Change[int] = UNCHANGED
    stream_uri: Change[str] = UNCHANGED
    status: Change[CameraStatus] = UNCHANGED
    group: Change[Optional[str]] = UNCHANGED
    interval_min: Change[int] = UNCHANGED
    retention_days: Change[int] = UNCHANGED

    def apply(self, camera: Camera) -> Camera:
        """Return a validated copy of camera with the supplied changes applied."""
        return replace(camera, **self.supplied())
