"""
Unit tests for camera use cases.
"""
from unittest.mock import AsyncMock

import pytest

from nvr_console.application.dto.camera_dto import CameraCreateRequest, CameraUpdateRequest
from nvr_console.application.dto.group_dto import GroupCreateRequest
from nvr_console.application.use_cases.group import CreateGroupUseCase
from nvr_console.application.use_cases.camera import (
    CreateCameraUseCase,
    DeleteCameraUseCase,
    GetCameraUseCase,
    ListCamerasUseCase,
    UpdateCameraUseCase,
)
from nvr_console.domain.constants import CameraFields
from nvr_console.domain.exceptions import InvalidInputError, InvalidPolicyError, NotFoundError
from nvr_console.domain.models import CameraChanges, SetTo, StorageConfig
from tests.conftest import make_camera


class TestCreateCameraUseCase:
    """Tests for CreateCameraUseCase"""

    @pytest.mark.asyncio
    async def test_defaults_applied(self, camera_repository, group_repository):
        use_case = CreateCameraUseCase(camera_repository, group_repository)
        result = await use_case.execute(CameraCreateRequest(name="Front Door", ip_address="192.168.1.101"))

        assert result.id.startswith("CAM-")
        assert result.port == 554
        assert result.stream_url == "rtsp://192.168.1.101:554/stream1"
        assert result.status == "online"
        assert result.recording_interval_min == 10
        assert result.retention_days == 3
        assert result.group_name is None
        assert result.added_at is not None

        stored = await camera_repository.find_by_id(result.id)
        assert stored is not None
        assert stored.name == "Front Door"

    @pytest.mark.asyncio
    async def test_stream_url_uses_given_port(self, camera_repository, group_repository):
        use_case = CreateCameraUseCase(camera_repository, group_repository)
        result = await use_case.execute(
            CameraCreateRequest(name="Yard", ip_address="10.0.0.7", port=8554)
        )
        assert result.stream_url == "rtsp://10.0.0.7:8554/stream1"

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, camera_repository, group_repository):
        use_case = CreateCameraUseCase(camera_repository, group_repository)
        request = CameraCreateRequest(name="Same", ip_address="10.0.0.1")
        first = await use_case.execute(request)
        second = await use_case.execute(request)
        assert first.id != second.id
        assert len(await camera_repository.find_all()) == 2

    @pytest.mark.asyncio
    async def test_new_group_is_created(self, camera_repository, group_repository):
        use_case = CreateCameraUseCase(camera_repository, group_repository)
        result = await use_case.execute(
            CameraCreateRequest(name="Gate", ip_address="10.0.0.2", group_name="Lab")
        )
        assert result.group_name == "Lab"
        assert "Lab" in [group.name for group in await group_repository.find_all()]

    @pytest.mark.asyncio
    async def test_missing_fields_reported_together(self):
        camera_repo = AsyncMock()
        group_repo = AsyncMock()
        use_case = CreateCameraUseCase(camera_repo, group_repo)
        with pytest.raises(InvalidInputError) as exc_info:
            await use_case.execute(CameraCreateRequest())
        assert set(exc_info.value.fields) == {CameraFields.NAME, CameraFields.IP_ADDRESS}
        camera_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_policy_persists_nothing(self):
        camera_repo = AsyncMock()
        group_repo = AsyncMock()
        use_case = CreateCameraUseCase(camera_repo, group_repo)
        with pytest.raises(InvalidPolicyError):
            await use_case.execute(
                CameraCreateRequest(
                    name="Bad", ip_address="10.0.0.3", group_name="Lab", recording_interval_min=0
                )
            )
        camera_repo.save.assert_not_called()
        group_repo.add_if_absent.assert_not_called()


class TestListAndGetCameraUseCase:
    """Tests for ListCamerasUseCase and GetCameraUseCase"""

    @pytest.mark.asyncio
    async def test_list_empty(self):
        repo = AsyncMock()
        repo.find_all.return_value = []
        result = await ListCamerasUseCase(repo).execute()
        assert result == []

    @pytest.mark.asyncio
    async def test_list_maps_wire_fields(self):
        repo = AsyncMock()
        repo.find_all.return_value = [make_camera("CAM-2", "Backyard"), make_camera("CAM-1", "Front Door")]
        result = await ListCamerasUseCase(repo).execute()
        assert [camera.id for camera in result] == ["CAM-2", "CAM-1"]
        assert result[1].ip_address == "192.168.1.101"
        assert result[1].stream_url == "rtsp://192.168.1.101:554/stream1"

    @pytest.mark.asyncio
    async def test_get_found(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = make_camera("CAM-1", "My Camera")
        result = await GetCameraUseCase(repo).execute("CAM-1")
        assert result.name == "My Camera"

    @pytest.mark.asyncio
    async def test_get_not_found_raises(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = None
        with pytest.raises(NotFoundError, match="Camera not found"):
            await GetCameraUseCase(repo).execute("nonexistent")


class TestUpdateCameraUseCase:
    """Tests for UpdateCameraUseCase"""

    @pytest.fixture
    def use_case(self, camera_repository, group_repository, storage_config_repository, recording_schedule):
        return UpdateCameraUseCase(
            camera_repository, group_repository, storage_config_repository, recording_schedule
        )

    @pytest.mark.asyncio
    async def test_only_supplied_fields_change(self, use_case, camera_repository):
        await camera_repository.save(make_camera(group="Exterior"))
        changes = CameraUpdateRequest(status="offline").to_changes()

        result = await use_case.execute("CAM-1", changes)

        assert result.status == "offline"
        assert result.name == "Front Door"
        assert result.group_name == "Exterior"
        assert result.recording_interval_min == 10

    @pytest.mark.asyncio
    async def test_empty_group_name_clears_group(self, use_case, camera_repository):
        await camera_repository.save(make_camera(group="Exterior"))
        result = await use_case.execute("CAM-1", CameraUpdateRequest(group_name="").to_changes())
        assert result.group_name is None

    @pytest.mark.asyncio
    async def test_new_group_created(self, use_case, camera_repository, group_repository):
        await camera_repository.save(make_camera())
        await use_case.execute("CAM-1", CameraChanges(group=SetTo("Parking")))
        assert "Parking" in [group.name for group in await group_repository.find_all()]

    @pytest.mark.asyncio
    async def test_empty_changes_rejected(self, use_case, camera_repository):
        await camera_repository.save(make_camera())
        with pytest.raises(InvalidInputError, match="No fields to update"):
            await use_case.execute("CAM-1", CameraChanges())

    @pytest.mark.asyncio
    async def test_unknown_camera(self, use_case):
        with pytest.raises(NotFoundError):
            await use_case.execute("CAM-404", CameraChanges(name=SetTo("X")))

    @pytest.mark.asyncio
    async def test_invalid_policy_leaves_camera_unchanged(self, use_case, camera_repository):
        await camera_repository.save(make_camera())
        with pytest.raises(InvalidPolicyError):
            await use_case.execute("CAM-1", CameraChanges(retention_days=SetTo(0)))
        stored = await camera_repository.find_by_id("CAM-1")
        assert stored.retention_days == 3

    @pytest.mark.asyncio
    async def test_policy_change_regenerates_online_camera(
        self, use_case, camera_repository, storage_config_repository, recording_schedule
    ):
        camera = make_camera()
        await camera_repository.save(camera)
        await storage_config_repository.save(
            StorageConfig(id="STO-1", type="local", name="Disk", active=True)
        )
        old_segments = recording_schedule.materialize(camera)

        await use_case.execute("CAM-1", CameraChanges(interval_min=SetTo(15)))

        updated = await camera_repository.find_by_id("CAM-1")
        new_segments = recording_schedule.current(updated)
        assert new_segments is not None
        assert len(new_segments) == 288
        assert set(old_segments).isdisjoint(new_segments)
        assert {segment.storage_backend for segment in new_segments} == {"Disk"}

    @pytest.mark.asyncio
    async def test_policy_change_on_offline_camera_discards_only(
        self, use_case, camera_repository, recording_schedule
    ):
        camera = make_camera(status="offline")
        await camera_repository.save(camera)
        recording_schedule.materialize(camera)

        await use_case.execute("CAM-1", CameraChanges(retention_days=SetTo(1)))

        updated = await camera_repository.find_by_id("CAM-1")
        assert recording_schedule.current(updated) is None

    @pytest.mark.asyncio
    async def test_non_policy_change_keeps_segments(self, use_case, camera_repository, recording_schedule):
        camera = make_camera()
        await camera_repository.save(camera)
        segments = recording_schedule.materialize(camera)

        await use_case.execute("CAM-1", CameraChanges(name=SetTo("Porch")))

        updated = await camera_repository.find_by_id("CAM-1")
        assert recording_schedule.current(updated) is segments


class TestDeleteCameraUseCase:
    """Tests for DeleteCameraUseCase"""

    @pytest.mark.asyncio
    async def test_delete_discards_segments(self, camera_repository, recording_schedule):
        camera = make_camera()
        await camera_repository.save(camera)
        recording_schedule.materialize(camera)

        await DeleteCameraUseCase(camera_repository, recording_schedule).execute("CAM-1")

        assert await camera_repository.find_by_id("CAM-1") is None
        assert recording_schedule.current(camera) is None

    @pytest.mark.asyncio
    async def test_delete_unknown_raises(self, recording_schedule):
        repo = AsyncMock()
        repo.delete.return_value = False
        with pytest.raises(NotFoundError):
            await DeleteCameraUseCase(repo, recording_schedule).execute("CAM-404")


class TestCameraGroupNames:
    """Camera paths trim group names like group creation does"""

    @pytest.mark.asyncio
    async def test_create_trims_group(self, camera_repository, group_repository):
        await CreateGroupUseCase(group_repository).execute(GroupCreateRequest(name=" Lab "))
        result = await CreateCameraUseCase(camera_repository, group_repository).execute(
            CameraCreateRequest(name="Gate", ip_address="10.0.0.2", group_name=" Lab ")
        )
        assert result.group_name == "Lab"
        assert [group.name for group in await group_repository.find_all()] == ["Lab"]

    @pytest.mark.asyncio
    async def test_update_trims_group(
        self, camera_repository, group_repository, storage_config_repository, recording_schedule
    ):
        await camera_repository.save(make_camera())
        use_case = UpdateCameraUseCase(
            camera_repository, group_repository, storage_config_repository, recording_schedule
        )
        result = await use_case.execute("CAM-1", CameraUpdateRequest(group_name="  Parking ").to_changes())
        assert result.group_name == "Parking"
        assert [group.name for group in await group_repository.find_all()] == ["Parking"]

    @pytest.mark.asyncio
    async def test_update_rejects_oversized_retention(
        self, camera_repository, group_repository, storage_config_repository, recording_schedule
    ):
        await camera_repository.save(make_camera())
        use_case = UpdateCameraUseCase(
            camera_repository, group_repository, storage_config_repository, recording_schedule
        )
        with pytest.raises(InvalidPolicyError):
            await use_case.execute("CAM-1", CameraChanges(retention_days=SetTo(1_000_000)))
        assert (await camera_repository.find_by_id("CAM-1")).retention_days == 3
