"""
Shared pytest fixtures for nvr_console tests.
"""
import os
from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from nvr_console.application.services.recording_schedule import RecordingSchedule
from nvr_console.core.config import Settings
from nvr_console.di.container import DIContainer, set_container
from nvr_console.domain.models.camera import Camera
from nvr_console.infrastructure.memory import (
    MemoryCameraRepository,
    MemoryGroupRepository,
    MemoryStorageConfigRepository,
)

FIXED_NOW = datetime(2025, 1, 15, 12, 34, 56, tzinfo=timezone.utc)


def make_camera(
    camera_id: str = "CAM-1",
    name: str = "Front Door",
    interval_min: int = 10,
    retention_days: int = 3,
    status: str = "online",
    group=None,
) -> Camera:
    return Camera(
        id=camera_id,
        name=name,
        address="192.168.1.101",
        port=554,
        stream_uri="rtsp://192.168.1.101:554/stream1",
        status=status,
        group=group,
        interval_min=interval_min,
        retention_days=retention_days,
        created_at=FIXED_NOW,
    )


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def recording_schedule():
    """Schedule whose clock is pinned to FIXED_NOW."""
    return RecordingSchedule(clock=lambda: FIXED_NOW)


@pytest.fixture
def camera_repository():
    return MemoryCameraRepository()


@pytest.fixture
def group_repository():
    return MemoryGroupRepository()


@pytest.fixture
def storage_config_repository():
    return MemoryStorageConfigRepository()


@pytest.fixture
def memory_settings():
    """Settings for the in-memory backend with a known set of default groups."""
    env_vars = {
        "PERSISTENCE_BACKEND": "memory",
        "DEFAULT_GROUPS": "Exterior,Interior,Perimeter",
        "CORS_ORIGIN": "*",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield Settings()


@pytest.fixture
def memory_container(memory_settings):
    """
    Global DI container backed by memory repositories, with the recording
    schedule clock pinned to FIXED_NOW. Reset after the test.
    """
    container = DIContainer(settings=memory_settings)
    container.register_singleton(RecordingSchedule, RecordingSchedule(clock=lambda: FIXED_NOW))
    set_container(container)
    yield container
    set_container(None)
