from .camera_controller import router as camera_router
from .group_controller import router as group_router
from .recording_controller import router as recording_router
from .storage_controller import router as storage_router
from .errors import register_exception_handlers


__all__ = [
    "camera_router",
    "group_router",
    "recording_router",
    "storage_router",
    "register_exception_handlers",
]
