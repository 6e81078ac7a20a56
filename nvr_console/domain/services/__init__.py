from .segment_generator import align_to_interval, generate_segments, iter_segments
from .storage_validator import ConnectionTestResult, validate_connection

__all__ = [
    "align_to_interval",
    "generate_segments",
    "iter_segments",
    "ConnectionTestResult",
    "validate_connection",
]
