"""
Unit tests for ListRecordingsUseCase.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from nvr_console.application.use_cases.recording.list_recordings import ListRecordingsUseCase
from nvr_console.domain.exceptions import NotFoundError
from nvr_console.domain.models import StorageConfig
from tests.conftest import make_camera


@pytest.fixture
def use_case(camera_repository, storage_config_repository, recording_schedule):
    return ListRecordingsUseCase(camera_repository, storage_config_repository, recording_schedule)


class TestListRecordingsUseCase:
    """Tests for ListRecordingsUseCase"""

    @pytest.mark.asyncio
    async def test_first_read_materializes_newest_first(self, use_case, camera_repository):
        await camera_repository.save(make_camera())

        result = await use_case.execute("CAM-1")

        assert len(result) == 432
        assert result[0].timestamp == datetime(2025, 1, 15, 12, 30, tzinfo=timezone.utc)
        assert result[-1].timestamp == datetime(2025, 1, 12, 12, 40, tzinfo=timezone.utc)
        assert result[0].duration == 600
        assert result[0].camera_id == "CAM-1"
        assert result[0].file_path is None
        assert result[0].storage_backend is None

    @pytest.mark.asyncio
    async def test_repeated_reads_are_identical(self, use_case, camera_repository):
        await camera_repository.save(make_camera())
        first = await use_case.execute("CAM-1")
        second = await use_case.execute("CAM-1")
        assert [segment.id for segment in first] == [segment.id for segment in second]

    @pytest.mark.asyncio
    async def test_active_backend_stamped(self, use_case, camera_repository, storage_config_repository):
        await camera_repository.save(make_camera())
        await storage_config_repository.save(
            StorageConfig(id="STO-1", type="s3", name="Cloud Archive", active=True)
        )
        result = await use_case.execute("CAM-1")
        assert {segment.storage_backend for segment in result} == {"Cloud Archive"}

    @pytest.mark.asyncio
    async def test_offline_camera_without_schedule_is_empty(self, use_case, camera_repository, recording_schedule):
        camera = make_camera(status="offline")
        await camera_repository.save(camera)
        assert await use_case.execute("CAM-1") == []
        assert recording_schedule.current(camera) is None

    @pytest.mark.asyncio
    async def test_offline_camera_keeps_existing_schedule(self, use_case, camera_repository, recording_schedule):
        camera = make_camera(status="offline")
        await camera_repository.save(camera)
        recording_schedule.materialize(camera)
        assert len(await use_case.execute("CAM-1")) == 432

    @pytest.mark.asyncio
    async def test_unknown_camera(self, recording_schedule):
        camera_repo = AsyncMock()
        camera_repo.find_by_id.return_value = None
        storage_repo = AsyncMock()
        use_case = ListRecordingsUseCase(camera_repo, storage_repo, recording_schedule)
        with pytest.raises(NotFoundError):
            await use_case.execute("CAM-404")
        storage_repo.find_active.assert_not_called()
