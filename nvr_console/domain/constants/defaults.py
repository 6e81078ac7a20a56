"""
Defaults applied when a camera or storage config is created with fields omitted.

Used by the create use cases and the Camera model, which also enforces the
recording policy bounds.
"""

# -----------------------------------------------------------------------------
# Cameras
# -----------------------------------------------------------------------------
DEFAULT_CAMERA_PORT = 554
DEFAULT_STREAM_PROTOCOL = "rtsp"
DEFAULT_STREAM_PATH = "stream1"
DEFAULT_RECORDING_INTERVAL_MIN = 10
DEFAULT_RETENTION_DAYS = 3

# Upper bounds of a recording policy
MAX_RECORDING_INTERVAL_MIN = 24 * 60
MAX_RETENTION_DAYS = 3650
MAX_SEGMENTS_PER_CAMERA = 100_000

# -----------------------------------------------------------------------------
# Storage backends
# -----------------------------------------------------------------------------
DEFAULT_STORAGE_ACTIVE = False


def default_stream_url(address: str, port: int) -> str:
    """Stream locator used when a camera is registered without one."""
    return f"{DEFAULT_STREAM_PROTOCOL}://{address}:{port}/{DEFAULT_STREAM_PATH}"
