from datetime import datetime
from typing import Optional, Dict, Any
from pydantic import BaseModel

from ...domain.models.partial import SetTo
from ...domain.models.storage_config import StorageConfig, StorageConfigChanges


class StorageConfigCreateRequest(BaseModel):
    """DTO for storage config creation request"""
    type: Optional[str] = None
    name: Optional[str] = None
    config: Optional[Dict[str, Any]] = None
    is_active: Optional[bool] = None


class StorageConfigUpdateRequest(BaseModel):
    """DTO for a partial storage config update"""
    type: Optional[str] = None
    name: Optional[str] = None
    config: Optional[Dict[str, Any]] = None
    is_active: Optional[bool] = None

    def to_changes(self) -> StorageConfigChanges:
        # null leaves a field as it is
        changes = StorageConfigChanges()
        if self.type is not None:
            changes.type = SetTo(self.type)
        if self.name is not None:
            changes.name = SetTo(self.name)
        if self.config is not None:
            changes.config = SetTo(self.config)
        if self.is_active is not None:
            changes.active = SetTo(self.is_active)
        return changes


class StorageConfigResponse(BaseModel):
    """DTO for storage config response"""
    id: str
    type: str
    name: str
    config: Dict[str, Any]
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_storage_config(cls, storage_config: StorageConfig) -> "StorageConfigResponse":
        return cls(
            id=storage_config.id or "",
            type=storage_config.type.value,
            name=storage_config.name,
            config=dict(storage_config.config),
            is_active=storage_config.active,
            created_at=storage_config.created_at,
            updated_at=storage_config.updated_at,
        )


class StorageTestRequest(BaseModel):
    """DTO for a storage connection test"""
    type: Optional[str] = None
    config: Optional[Dict[str, Any]] = None


class StorageTestResponse(BaseModel):
    """Result of a storage connection test (field validation only)"""
    success: bool
    message: str
