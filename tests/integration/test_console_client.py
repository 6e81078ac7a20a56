"""
Integration tests for ConsoleClient.
The client talks to the application in-process through httpx.ASGITransport;
the app lifespan does not run, so no default groups are seeded.
"""
import httpx
import pytest

pytestmark = pytest.mark.integration

from nvr_console.infrastructure.external import ConsoleApiError, ConsoleClient


@pytest.fixture
def console_client(memory_container):
    from nvr_console.main import app

    transport = httpx.ASGITransport(app=app)
    return ConsoleClient(base_url="http://console.test", transport=transport)


class TestConsoleClient:
    """Tests for ConsoleClient against the in-memory backend"""

    @pytest.mark.asyncio
    async def test_camera_lifecycle(self, console_client):
        camera = await console_client.create_camera(name="Front Door", ip_address="192.168.1.101")
        assert camera.stream_url == "rtsp://192.168.1.101:554/stream1"

        cameras = await console_client.list_cameras()
        assert [item.id for item in cameras] == [camera.id]

        updated = await console_client.update_camera(camera.id, retention_days=1)
        assert updated.retention_days == 1

        recordings = await console_client.list_recordings(camera.id)
        assert len(recordings) == 144
        assert recordings[0].timestamp > recordings[-1].timestamp

        await console_client.delete_camera(camera.id)
        with pytest.raises(ConsoleApiError) as exc_info:
            await console_client.get_camera(camera.id)
        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Camera not found"

    @pytest.mark.asyncio
    async def test_rejected_command_carries_server_message(self, console_client):
        with pytest.raises(ConsoleApiError) as exc_info:
            await console_client.create_camera(name="No Address")
        assert exc_info.value.status_code == 400
        assert exc_info.value.message

    @pytest.mark.asyncio
    async def test_groups(self, console_client):
        assert await console_client.create_group("Lab") == "Lab"
        assert await console_client.list_groups() == ["Lab"]
        await console_client.delete_group("Lab")
        assert await console_client.list_groups() == []

    @pytest.mark.asyncio
    async def test_storage(self, console_client):
        created = await console_client.create_storage_config("local", "Disk")
        assert created.is_active is False

        activated = await console_client.activate_storage_config(created.id)
        assert activated.is_active is True

        renamed = await console_client.update_storage_config(created.id, name="NAS")
        assert renamed.name == "NAS"

        configs = await console_client.list_storage_configs()
        assert [config.id for config in configs] == [created.id]

        await console_client.delete_storage_config(created.id)
        assert await console_client.list_storage_configs() == []

    @pytest.mark.asyncio
    async def test_storage_check_failure_is_returned(self, console_client):
        result = await console_client.test_storage_config("ftp", {"host": "ftp.example.com"})
        assert result.success is False
        assert result.message == "Missing FTP fields: username, password"

    @pytest.mark.asyncio
    async def test_unreachable_api(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = ConsoleClient(base_url="http://console.test", transport=httpx.MockTransport(refuse))
        with pytest.raises(ConsoleApiError) as exc_info:
            await client.list_cameras()
        assert exc_info.value.status_code is None
        assert exc_info.value.message == "Console API unreachable"
