# Standard library imports
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

# External package imports
import httpx

# Local application imports
from ...core.config import get_settings
from ...application.dto.camera_dto import CameraResponse
from ...application.dto.recording_dto import RecordingResponse
from ...application.dto.storage_dto import StorageConfigResponse, StorageTestResponse

logger = logging.getLogger(__name__)


class ConsoleApiError(Exception):
    """
    Raised when the console API rejects a command or cannot be reached.

    message is the server's error text, suitable for a transient notification.
    status_code is None when no response was received.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ConsoleClient:
    """
    HTTP client the presentation layer uses to drive the console API.
    
    One coroutine per resource operation. Responses are parsed into the same
    DTOs the API serves. Every failure surfaces as ConsoleApiError; none of
    them leave the caller in a broken state.
    """
    
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize console client.
        
        Args:
            base_url: Base URL of the console API. If None, reads CONSOLE_API_URL.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (e.g. httpx.ASGITransport for in-process use).
        """
        settings = get_settings()
        self.base_url = (base_url or settings.console_api_url).rstrip("/")
        self.timeout = timeout
        self.transport = transport
    
    async def _request(self, method: str, path: str, json: Optional[Any] = None) -> httpx.Response:
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
        ) as client:
            try:
                return await client.request(method, path, json=json)
            except httpx.TimeoutException as e:
                logger.error(f"Timeout calling {method} {path} on console API: {e}")
                raise ConsoleApiError("Request timed out")
            except httpx.HTTPError as e:
                logger.error(f"Error calling {method} {path} on console API: {e}")
                raise ConsoleApiError("Console API unreachable")
    
    async def _call(self, method: str, path: str, json: Optional[Any] = None) -> Any:
        response = await self._request(method, path, json=json)
        if response.is_error:
            raise ConsoleApiError(self._error_message(response), status_code=response.status_code)
        return response.json()
    
    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.reason_phrase or f"HTTP {response.status_code}"
        if isinstance(body, dict):
            return body.get("error") or body.get("message") or response.reason_phrase
        return response.reason_phrase
    
    # ------------------------------------------------------------------
    # Cameras
    # ------------------------------------------------------------------
    
    async def list_cameras(self) -> List[CameraResponse]:
        data = await self._call("GET", "/api/cameras")
        return [CameraResponse.model_validate(item) for item in data]
    
    async def get_camera(self, camera_id: str) -> CameraResponse:
        data = await self._call("GET", f"/api/cameras/{quote(camera_id, safe='')}")
        return CameraResponse.model_validate(data)
    
    async def create_camera(self, **fields: Any) -> CameraResponse:
        """
        Register a camera. Accepts the wire field names: name, ip_address,
        port, stream_url, group_name, recording_interval_min, retention_days.
        """
        data = await self._call("POST", "/api/cameras", json=fields)
        return CameraResponse.model_validate(data)
    
    async def update_camera(self, camera_id: str, **fields: Any) -> CameraResponse:
        """Send only the given fields; pass group_name=None to clear the group."""
        data = await self._call("PUT", f"/api/cameras/{quote(camera_id, safe='')}", json=fields)
        return CameraResponse.model_validate(data)
    
    async def delete_camera(self, camera_id: str) -> None:
        await self._call("DELETE", f"/api/cameras/{quote(camera_id, safe='')}")
    
    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------
    
    async def list_groups(self) -> List[str]:
        return await self._call("GET", "/api/groups")
    
    async def create_group(self, name: str) -> str:
        data = await self._call("POST", "/api/groups", json={"name": name})
        return data["name"]
    
    async def delete_group(self, name: str) -> None:
        await self._call("DELETE", f"/api/groups/{quote(name, safe='')}")
    
    # ------------------------------------------------------------------
    # Recordings
    # ------------------------------------------------------------------
    
    async def list_recordings(self, camera_id: str) -> List[RecordingResponse]:
        data = await self._call("GET", f"/api/recordings/{quote(camera_id, safe='')}")
        return [RecordingResponse.model_validate(item) for item in data]
    
    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------
    
    async def list_storage_configs(self) -> List[StorageConfigResponse]:
        data = await self._call("GET", "/api/storage")
        return [StorageConfigResponse.model_validate(item) for item in data]
    
    async def create_storage_config(
        self,
        type: str,
        name: str,
        config: Optional[Dict[str, Any]] = None,
        is_active: Optional[bool] = None,
    ) -> StorageConfigResponse:
        payload: Dict[str, Any] = {"type": type, "name": name, "config": config or {}}
        if is_active is not None:
            payload["is_active"] = is_active
        data = await self._call("POST", "/api/storage", json=payload)
        return StorageConfigResponse.model_validate(data)
    
    async def update_storage_config(self, config_id: str, **fields: Any) -> StorageConfigResponse:
        data = await self._call("PUT", f"/api/storage/{quote(config_id, safe='')}", json=fields)
        return StorageConfigResponse.model_validate(data)
    
    async def delete_storage_config(self, config_id: str) -> None:
        await self._call("DELETE", f"/api/storage/{quote(config_id, safe='')}")
    
    async def activate_storage_config(self, config_id: str) -> StorageConfigResponse:
        data = await self._call("POST", f"/api/storage/{quote(config_id, safe='')}/activate")
        return StorageConfigResponse.model_validate(data)
    
    async def test_storage_config(self, type: str, config: Optional[Dict[str, Any]] = None) -> StorageTestResponse:
        """
        Run the field-presence check for a storage config.
        
        A failed check is returned (success=False), not raised.
        """
        response = await self._request("POST", "/api/storage/test", json={"type": type, "config": config or {}})
        if response.status_code in (200, 400):
            body = response.json()
            if isinstance(body, dict) and "success" in body:
                return StorageTestResponse.model_validate(body)
        raise ConsoleApiError(self._error_message(response), status_code=response.status_code)
