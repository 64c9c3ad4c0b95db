from .recording_repository import RecordingRepository

__all__ = ["RecordingRepository"]
