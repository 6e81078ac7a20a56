from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from ...domain.models.camera import Camera, CameraChanges
from ...domain.models.partial import SetTo


class CameraCreateRequest(BaseModel):
    """
    DTO for camera creation request.

    name and ip_address are required; they are optional here so that the
    use case can report every missing field at once.
    """
    name: Optional[str] = None
    ip_address: Optional[str] = None
    port: Optional[int] = None
    stream_url: Optional[str] = None
    group_name: Optional[str] = None
    recording_interval_min: Optional[int] = None
    retention_days: Optional[int] = None


class CameraUpdateRequest(BaseModel):
    """DTO for a partial camera update - only fields present in the body change"""
    name: Optional[str] = None
    ip_address: Optional[str] = None
    port: Optional[int] = None
    stream_url: Optional[str] = None
    status: Optional[str] = None
    group_name: Optional[str] = None
    recording_interval_min: Optional[int] = None
    retention_days: Optional[int] = None

    def to_changes(self) -> CameraChanges:
        """Translate wire field names into a CameraChanges; absent fields stay UNCHANGED"""
        supplied = self.model_fields_set
        changes = CameraChanges()
        if "name" in supplied:
            changes.name = SetTo(self.name)
        if "ip_address" in supplied:
            changes.address = SetTo(self.ip_address)
        if "port" in supplied:
            changes.port = SetTo(self.port)
        if "stream_url" in supplied:
            changes.stream_uri = SetTo(self.stream_url)
        if "status" in supplied:
            changes.status = SetTo(self.status)
        if "group_name" in supplied:
            # Blank string clears membership, same as null
            changes.group = SetTo((self.group_name or "").strip() or None)
        if "recording_interval_min" in supplied:
            changes.interval_min = SetTo(self.recording_interval_min)
        if "retention_days" in supplied:
            changes.retention_days = SetTo(self.retention_days)
        return changes


class CameraResponse(BaseModel):
    """DTO for camera response"""
    id: str
    name: str
    ip_address: str
    port: int
    stream_url: str
    status: str
    group_name: Optional[str] = None
    recording_interval_min: int
    retention_days: int
    added_at: Optional[datetime] = None

    @classmethod
    def from_camera(cls, camera: Camera) -> "CameraResponse":
        return cls(
            id=camera.id or "",
            name=camera.name,
            ip_address=camera.address,
            port=camera.port,
            stream_url=camera.stream_uri,
            status=camera.status.value,
            group_name=camera.group,
            recording_interval_min=camera.interval_min,
            retention_days=camera.retention_days,
            added_at=camera.created_at,
        )
