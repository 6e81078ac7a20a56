"""
Storage connection test.

This is a stub: it only checks that the keys a backend type needs are
present and non-empty. No network or filesystem access is attempted, so a
successful result says nothing about whether the backend is reachable.
"""
# Standard library imports
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

# Local application imports
from ..models.storage_config import StorageType

REQUIRED_KEYS: Dict[StorageType, Tuple[str, ...]] = {
    StorageType.S3: ("endpoint", "bucket", "accessKey", "secretKey"),
    StorageType.FTP: ("host", "username", "password"),
    StorageType.HTTP: ("url",),
    StorageType.LOCAL: (),
}

_LABELS = {
    StorageType.S3: "S3",
    StorageType.FTP: "FTP",
    StorageType.HTTP: "HTTP",
    StorageType.LOCAL: "local",
}

STUB_SUCCESS_MESSAGE = "Configuration validated (connection test not yet implemented)"


@dataclass(frozen=True)
class ConnectionTestResult:
    ok: bool
    message: str
    missing_fields: List[str] = field(default_factory=list)


def validate_connection(
    storage_type: Optional[str],
    config: Optional[Mapping[str, Any]],
) -> ConnectionTestResult:
    """
    Check that config carries every key the storage type requires.

    Args:
        storage_type: One of s3, ftp, http, local
        config: Free-form key/value payload

    Returns:
        ConnectionTestResult with ok=False and a message naming the missing keys
        when validation fails
    """
    try:
        kind = StorageType(storage_type)
    except ValueError:
        allowed = ", ".join(item.value for item in StorageType)
        return ConnectionTestResult(
            ok=False,
            message=f"Unsupported storage type '{storage_type}'. Expected one of: {allowed}",
        )

    payload = config or {}
    required = REQUIRED_KEYS[kind]
    missing = [key for key in required if not payload.get(key)]
    if missing:
        noun = "field" if len(required) == 1 else "fields"
        return ConnectionTestResult(
            ok=False,
            message=f"Missing {_LABELS[kind]} {noun}: {', '.join(missing)}",
            missing_fields=missing,
        )

    return ConnectionTestResult(ok=True, message=STUB_SUCCESS_MESSAGE)
