# Standard library imports
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

# Local application imports
from ..constants import StorageConfigFields
from ..exceptions import InvalidInputError
from .partial import ChangeSet, Change, UNCHANGED


class StorageType(str, Enum):
    """Kinds of archive destination a storage config can describe."""
    S3 = "s3"
    FTP = "ftp"
    HTTP = "http"
    LOCAL = "local"


@dataclass
class StorageConfig:
    """
    Named storage backend configuration.

    Only a configuration record: nothing in the console reads or writes to
    the backend it describes. At most one config is active at a time.
    """
    id: Optional[str]
    type: StorageType
    name: str
    config: Dict[str, Any] = field(default_factory=dict)
    active: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        problems = {}
        try:
            self.type = StorageType(self.type)
        except ValueError:
            allowed = ", ".join(item.value for item in StorageType)
            problems[StorageConfigFields.TYPE] = f"Type must be one of: {allowed}"
        if not self.name or len(self.name.strip()) < 1:
            problems[StorageConfigFields.NAME] = "Storage config name is required"
        if self.config is None:
            self.config = {}
        elif not isinstance(self.config, dict):
            problems[StorageConfigFields.CONFIG] = "Config must be an object"
        if problems:
            raise InvalidInputError("Invalid storage config fields", fields=problems)


@dataclass
class StorageConfigChanges(ChangeSet):
    """Partial update for a storage config."""
    type: Change[StorageType] = UNCHANGED
    name: Change[str] = UNCHANGED
    config: Change[Dict[str, Any]] = UNCHANGED
    active: Change[bool] = UNCHANGED

    def apply(self, storage_config: StorageConfig, updated_at: datetime) -> StorageConfig:
        """Return a validated copy of storage_config with the supplied changes applied."""
        return replace(storage_config, updated_at=updated_at, **self.supplied())

    def activates(self) -> bool:
        return self.supplied().get("active") is True
