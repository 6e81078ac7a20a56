from .recording_schedule import RecordingSchedule

__all__ = ["RecordingSchedule"]
